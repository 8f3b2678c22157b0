from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a single lookup.

    access_count counts bucket and page reads for an index search
    (always >= 1) and page reads for a table scan (>= 0).
    """
    found: bool
    page_number: int
    access_count: int
    search_key: str

    def __str__(self) -> str:
        if self.found:
            return (f"Found '{self.search_key}' on page {self.page_number} "
                    f"(accessed {self.access_count} pages)")
        return f"Key '{self.search_key}' not found (accessed {self.access_count} pages)"
