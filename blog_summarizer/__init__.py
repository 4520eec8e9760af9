"""Blog summarizer client: submits a blog URL and presents the summary."""
