"""Reference data bundled with the package."""
