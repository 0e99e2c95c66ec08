import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent / 'src'))

from id3tree.cli import cli


if __name__ == '__main__':
    cli()
