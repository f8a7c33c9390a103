from system_css.cli.main import main

__all__ = ["main"]
