#!/usr/bin/env python3
"""
Index Search vs Table Scan Walkthrough

This example builds a static hash index over the bundled word list with each
available hash function and compares the cost of an index search against a
full table scan:
- Paging the word list into fixed-capacity pages
- Constructing the bucket index and its collision/overflow statistics
- Running lookups from a worker pool, the way a UI would keep itself responsive
- Comparing page accesses and elapsed time

Run with: python examples/compare_search.py
"""

from concurrent.futures import ThreadPoolExecutor

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from hashindex import HashIndexEngine, HashFunctionType, HashIndexException

PAGE_SIZE = 100
BUCKET_CAPACITY = 5
SEARCH_WORDS = ["hello", "world", "computer", "algorithm", "data", "zebra", "notaword"]

console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a header panel"""
    if subtitle:
        full_title = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
    else:
        full_title = f"[bold blue]{title}[/bold blue]"

    console.print(Panel(
        full_title,
        style="bright_blue",
        box=box.DOUBLE,
        padding=(1, 2)
    ))


def print_step(step_num: int, title: str):
    """Print a step header"""
    console.print(f"[bold yellow]Step {step_num}: {title}[/bold yellow]")
    console.print()


def create_construction_table(rows) -> Table:
    """Create a table of index statistics per hash function"""
    table = Table(title="Index Construction", box=box.ROUNDED)
    table.add_column("Hash Function", style="cyan", no_wrap=True)
    table.add_column("Buckets", style="green", justify="right")
    table.add_column("Collisions", style="magenta", justify="right")
    table.add_column("Overflows", style="magenta", justify="right")
    table.add_column("Longest Chain", style="white", justify="right")

    for name, stats, index_stats in rows:
        table.add_row(
            name,
            f"{stats.total_buckets:,}",
            f"{stats.collisions:,} ({stats.collision_rate:.1f}%)",
            f"{stats.overflows:,} ({stats.overflow_rate:.1f}%)",
            str(index_stats['max_chain_length']),
        )
    return table


def create_search_table(results) -> Table:
    """Create a table comparing index search and table scan for each word"""
    table = Table(title="Index Search vs Table Scan", box=box.ROUNDED)
    table.add_column("Word", style="cyan", no_wrap=True)
    table.add_column("Found", style="white")
    table.add_column("Page", style="green", justify="right")
    table.add_column("Index Accesses", style="magenta", justify="right")
    table.add_column("Scan Accesses", style="magenta", justify="right")

    for index_result, scan_result in results:
        table.add_row(
            index_result.search_key,
            "[green]yes[/green]" if index_result.found else "[red]no[/red]",
            str(index_result.page_number),
            str(index_result.access_count),
            str(scan_result.access_count),
        )
    return table


def demonstrate_construction(engine: HashIndexEngine):
    print_step(1, f"Loading words into pages of {PAGE_SIZE}")
    engine.load(PAGE_SIZE)
    stats = engine.get_statistics()
    console.print(f"[bold green]✓[/bold green] {stats.total_records:,} records in "
                  f"{stats.total_pages:,} pages")
    console.print(f"[bold cyan]ℹ[/bold cyan] First page: {engine.get_first_page()}")
    console.print(f"[bold cyan]ℹ[/bold cyan] Last page: {engine.get_last_page()}")
    console.print()

    print_step(2, f"Constructing the index with bucket capacity {BUCKET_CAPACITY}")
    rows = []
    for hash_type in HashFunctionType:
        engine.set_hash_function(hash_type)
        engine.construct(BUCKET_CAPACITY)
        rows.append((hash_type.get_display_name(), engine.get_statistics(),
                     engine.get_bucket_index().get_statistics()))
    console.print(create_construction_table(rows))
    console.print()


def demonstrate_search(engine: HashIndexEngine):
    print_step(3, "Searching from a worker pool")

    def lookup(word):
        return engine.search_with_index(word), engine.table_scan(word)

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(lookup, SEARCH_WORDS))

    console.print(create_search_table(results))
    console.print()


def main():
    print_header("Hash Index Simulator",
                 "Static hash index vs full table scan over a paged word list")

    engine = HashIndexEngine()
    try:
        demonstrate_construction(engine)
        demonstrate_search(engine)
    except HashIndexException as e:
        console.print(f"[bold red]✗[/bold red] {e}")
        raise

    console.print(Rule("[dim]Final statistics[/dim]"))
    console.print(str(engine.get_statistics()))


if __name__ == "__main__":
    main()
