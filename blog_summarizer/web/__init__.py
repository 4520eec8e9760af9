"""Web page package: FastAPI app serving the summarizer form and results."""
