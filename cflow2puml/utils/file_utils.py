"""
Utility functions for file operations
"""
import os
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from cflow2puml.config.settings import ENCODING, STDIO_PATH


def ensure_dir(directory: str) -> None:
    """
    Ensure a directory exists, creating it if necessary

    Args:
        directory: Path to directory to ensure
    """
    if directory and not os.path.exists(directory):
        os.makedirs(directory)


def _read_stream(stream: TextIO, encoding: str) -> Iterator[str]:
    # Decode the raw bytes ourselves so the configured encoding wins over the locale
    buffer = getattr(stream, 'buffer', None)
    if buffer is None:
        yield from stream
        return
    for raw in buffer:
        yield raw.decode(encoding, errors='replace')


def iter_input_lines(paths: Optional[List[str]] = None, encoding: str = ENCODING) -> Iterator[str]:
    """
    Iterate over the lines of several inputs as one stream

    Args:
        paths: Files to read in order; "-" or an empty list means stdin
        encoding: Text encoding of the inputs

    Returns:
        Iterator over the lines, terminators included
    """
    for path in paths or [STDIO_PATH]:
        if path == STDIO_PATH:
            yield from _read_stream(sys.stdin, encoding)
            continue

        if not os.path.exists(path):
            raise FileNotFoundError(f"File {path} not found")

        with open(path, 'r', encoding=encoding, errors='replace') as f:
            yield from f


def silence_stdout() -> None:
    """
    Point the stdout file descriptor at os.devnull

    Used after a BrokenPipeError so the final flush at exit has somewhere
    to go. Does nothing when stdout is not backed by a file descriptor.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def write_output(fragments: Iterable[str], path: Optional[str] = None,
                 encoding: str = ENCODING) -> None:
    """
    Write text fragments to a file or to stdout

    Args:
        fragments: Text to write, concatenated as is
        path: Destination file; None or "-" means stdout
        encoding: Text encoding of the output

    Raises:
        OSError: If the output cannot be written
    """
    content = ''.join(fragments)

    if path is None or path == STDIO_PATH:
        buffer = getattr(sys.stdout, 'buffer', None)
        if buffer is None:
            sys.stdout.write(content)
            sys.stdout.flush()
        else:
            buffer.write(content.encode(encoding))
            buffer.flush()
        return

    ensure_dir(os.path.dirname(path))

    with open(path, 'w', encoding=encoding) as f:
        f.write(content)
