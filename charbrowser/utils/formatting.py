"""Text formatting utilities."""


def truncate_text(text: str, max_length: int = 100) -> str:
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + "..."


def format_ki(ki: str) -> str:
    if not ki or not ki.strip():
        return "Unknown"
    return ki.strip()


def format_status(loaded_count: int, term: str, visible_count: int) -> str:
    if term.strip():
        return f"Search: {visible_count} results for '{term}'"
    return f"Showing {loaded_count} characters"
