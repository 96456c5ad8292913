#!/usr/bin/env python3
"""
Walk through ribbongrid-cli invocations by calling its entry point in-process.
"""

from ribbongrid.frontends.cli import main as cli_main

EXAMPLES = [
    ("Default 20x10 grid", []),
    ("Smallest grid as plain text", ["-r", "5", "-c", "5", "--format", "text"]),
    ("Shifted ribbons with color counts", ["-r", "10", "-c", "10", "--phase", "1", "--stats"]),
    ("One full animation cycle", ["-r", "8", "-c", "6", "--frames", "7", "--no-sleep", "--format", "text"]),
    ("JSON output with metrics", ["-r", "6", "-c", "6", "--format", "json", "--stats"]),
    ("Invalid arguments (expected exit code 1)", ["--frames", "0"]),
]


def main():
    """Run each example and report its exit code."""
    exit_codes = {}
    for title, argv in EXAMPLES:
        print(f"\n== {title}: ribbongrid-cli {' '.join(argv)}".rstrip())
        exit_codes[title] = cli_main(argv)

    print("\nExit codes:")
    for title, code in exit_codes.items():
        print(f"  {code}  {title}")


if __name__ == "__main__":
    main()
