from stylebox.cli.main import cli

__all__ = ["cli"]
