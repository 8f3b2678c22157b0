#!/usr/bin/env python3
"""
makefile.py - Task runner for the hash index simulator.

Usage:
    python makefile.py <target>

Requires the dev extra:  pip install -e .[dev]
"""

import os
import shutil
import subprocess
import sys
from collections import defaultdict
from pathlib import Path

from colorama import Fore, Style
from colorama import init as _colorama_init

_colorama_init(autoreset=True)

PROJECT_ROOT = Path(__file__).parent.absolute()


def print_header(title):
    bar = Fore.CYAN + Style.BRIGHT + "=" * 52 + Style.RESET_ALL
    label = Fore.CYAN + Style.BRIGHT + f"  {title}" + Style.RESET_ALL
    print(f"\n{bar}\n{label}\n{bar}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def print_warn(msg):
    print(f"{Fore.YELLOW}[WARN]{Style.RESET_ALL} {msg}")


def run_cmd(args, allow_failure=False):
    """
    Run a command as a subprocess, streaming output directly to the terminal.
    Exits with the subprocess exit code on failure unless allow_failure=True.
    """
    try:
        result = subprocess.run(args, cwd=PROJECT_ROOT)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        print(f"        Ensure '{args[0]}' is installed and on your PATH.")
        if not allow_failure:
            sys.exit(127)
        return 127
    if result.returncode != 0 and not allow_failure:
        sys.exit(result.returncode)
    return result.returncode


def pytest(*args):
    return run_cmd([sys.executable, "-m", "pytest", *args])


def target_test():
    print_header("Running All Tests")
    pytest("tests", "-v")


def target_test_hash():
    print_header("Running Hash Function Tests")
    pytest("tests/test_hash_function", "-v")


def target_test_storage():
    print_header("Running Page and Record Source Tests")
    pytest("tests/test_storage_page", "tests/test_record_source", "-v")


def target_test_index():
    print_header("Running Bucket Index Tests")
    pytest("tests/test_index", "-v")


def target_test_engine():
    print_header("Running Engine Tests")
    pytest("tests/test_engine", "-v")


def target_test_coverage():
    print_header("Running Tests with Coverage")
    pytest("tests", "--cov=hashindex", "--cov-report=term-missing")


def target_coverage_html():
    print_header("Generating HTML Coverage Report")
    pytest("tests", "--cov=hashindex", "--cov-report=html")
    print_success("Coverage report written to htmlcov/index.html")


def target_install():
    print_header("Installing in Editable Mode")
    run_cmd([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])
    print_success("Installation complete!")


def target_clean():
    print_header("Cleaning Build and Test Artifacts")
    for name in (".pytest_cache", "htmlcov", "build", "dist", ".coverage"):
        path = PROJECT_ROOT / name
        if path.is_dir():
            shutil.rmtree(path, ignore_errors=True)
            print_step(f"Removed {name}/")
        elif path.exists():
            try:
                os.remove(path)
                print_step(f"Removed {name}")
            except OSError as exc:
                print_warn(f"Could not remove {name}: {exc}")
    for cache in PROJECT_ROOT.rglob("__pycache__"):
        shutil.rmtree(cache, ignore_errors=True)
    print_success("Clean complete")


def target_run():
    print_header("Running Hash Index Simulator")
    run_cmd([sys.executable, "-m", "hashindex.main", *sys.argv[2:]])


def target_examples():
    print_header("Running Index vs Scan Example")
    run_cmd([sys.executable, "examples/compare_search.py"])


def target_check():
    print_header("Full Check: tests + example run")
    target_test()
    target_run()


TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-hash": (target_test_hash, "Run hash function tests only", "Testing"),
    "test-storage": (target_test_storage, "Run page and record source tests", "Testing"),
    "test-index": (target_test_index, "Run bucket index tests", "Testing"),
    "test-engine": (target_test_engine, "Run engine tests", "Testing"),
    "test-coverage": (target_test_coverage, "Run tests with coverage", "Testing"),
    "coverage-html": (target_coverage_html, "Generate htmlcov/ report", "Testing"),
    "install": (target_install, "pip install -e .[dev]", "Tools"),
    "clean": (target_clean, "Remove caches and build artifacts", "Tools"),
    "run": (target_run, "Run the simulator (extra args are search words)", "Run"),
    "examples": (target_examples, "Run the rich index vs scan walkthrough", "Run"),
    "check": (target_check, "test + run", "Run"),
    "help": (None, "Show this help message", "Meta"),
}


def target_help():
    title = (
        Fore.CYAN
        + Style.BRIGHT
        + "Hash Index Simulator - Available Commands"
        + Style.RESET_ALL
    )
    print(f"\n{title}\n")
    groups = defaultdict(list)
    for name, (_, desc, group) in TARGETS.items():
        groups[group].append((name, desc))
    group_order = ["Testing", "Run", "Tools", "Meta"]
    for group in group_order:
        if group not in groups:
            continue
        header = Fore.YELLOW + Style.BRIGHT + f"{group}:" + Style.RESET_ALL
        print(header)
        for name, desc in groups[group]:
            padded = name.ljust(24)
            print(f"  {Fore.GREEN}{padded}{Style.RESET_ALL}  {desc}")
        print()


TARGETS["help"] = (target_help, "Show this help message", "Meta")


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
