"""Root pytest configuration: puts the project root on sys.path so `src.*` imports resolve."""
