"""
Example: Resolve links to files inside the current repository.

Run from inside a git checkout:

    python examples/basic_usage.py path/to/file.py
"""

import sys

from git_link import LinkHandler, VcsError


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else __file__
    handler = LinkHandler()

    print("=== Repository ===")
    if not handler.is_inside_repository(path):
        print(f"{path} is not inside a repository")
        return

    print("=== Authoring a link ===")
    link = handler.create_link(path)
    print(link)

    print("\n=== Opening the link at HEAD ===")
    try:
        local = handler.resolve_from_file_path(path, "HEAD")
    except VcsError as e:
        print(f"git failed: {e.output}")
        return
    print(f"Materialized at {local}")

    print("\n=== Opening it again (served from cache) ===")
    print(handler.resolve_from_file_path(path, "HEAD"))

    print("\n=== Cache Statistics ===")
    for key, value in handler.cache.stats().items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    main()
