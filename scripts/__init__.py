"""Database diagnostic scripts for module-style execution.

Allows running scripts via `python -m scripts.<name>` so imports from
project root (e.g., `import database`) work without PYTHONPATH tweaks.
"""
