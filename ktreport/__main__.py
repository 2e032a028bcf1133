"""
CLI entry point for ktreport.
"""
from .cli import cli


def main():
    cli(prog_name="ktreport")


if __name__ == "__main__":
    main()
