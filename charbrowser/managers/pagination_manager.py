"""Pagination state management for infinite scroll."""


class PaginationManager:
    """Page cursor for one list.

    ``generation`` is bumped on every reset; a fetch started under an older
    generation must not apply its result.
    """

    def __init__(self, page_size: int = 10):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.current_page = 0
        self.has_more = True
        self.loading = False
        self.generation = 0

    @property
    def next_page(self) -> int:
        return self.current_page + 1

    def can_load_more(self) -> bool:
        return self.has_more and not self.loading

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def start_loading(self) -> int:
        self.loading = True
        return self.generation

    def finish_loading(self, page_number: int, total_pages: int) -> None:
        self.loading = False
        self.current_page = page_number
        self.has_more = page_number < total_pages

    def fail(self) -> None:
        self.loading = False
        self.has_more = False

    def reset(self) -> int:
        """Start a new generation at page 1 and return it."""
        self.generation += 1
        self.current_page = 1
        self.has_more = True
        self.loading = False
        return self.generation

    def invalidate(self) -> None:
        self.generation += 1
        self.loading = False
