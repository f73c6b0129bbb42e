"""Entry point for adding properties tables to an exported Obsidian site."""

from properties_table.add_frontmatter import main

if __name__ == "__main__":
    raise SystemExit(main())
