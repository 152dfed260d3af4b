from axcss.cli.main import cli

__all__ = ["cli"]
