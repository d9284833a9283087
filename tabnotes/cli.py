"""Command line interface for browsing, importing and rendering songs.

Usage:
    tabnotes list
    tabnotes show <song_id>
    tabnotes import <chord_sheet.txt> --title "Song" --artist "Band"
    tabnotes delete <song_id>
    tabnotes tab 1:3 1:5,2:12
    tabnotes chords lyrics.txt --chord Am@0 --chord G@6
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tabnotes.chord_sheet import import_song, parse_song_text
from tabnotes.config import (
    SettingsStore,
    StorageRoot,
    default_app_dir,
    resolve_storage_root,
)
from tabnotes.editing import add_chord, add_note, parse_fret_input
from tabnotes.models import ChordsLyricsBlock, TabBlock, new_id
from tabnotes.sheet import preview_block, render_song
from tabnotes.storage import SongStore

logger = logging.getLogger(__name__)


def parse_note_arg(text: str) -> dict[int, str]:
    """Parse a note written as ``string:fret`` pairs, e.g. ``1:3,2:12``.

    Raises
    ------
    ValueError
        If a pair is malformed or a fret is out of range.

    Examples
    --------
    >>> parse_note_arg("1:3,2:12")
    {1: '3', 2: '12'}
    """
    frets: dict[int, str] = {}
    for pair in text.split(","):
        string_part, sep, fret_part = pair.partition(":")
        if not sep or not string_part.strip().isdigit():
            msg = f"Expected string:fret, got {pair!r}"
            raise ValueError(msg)
        fret = parse_fret_input(fret_part.strip())
        if fret is not None:
            frets[int(string_part)] = fret
    return frets


def parse_chord_arg(text: str) -> tuple[str, int]:
    """Parse a chord written as ``label@offset``, e.g. ``Am@6``.

    Examples
    --------
    >>> parse_chord_arg("F#m7@12")
    ('F#m7', 12)
    """
    label, sep, offset = text.rpartition("@")
    if not sep or not label or not offset.isdigit():
        msg = f"Expected chord@offset, got {text!r}"
        raise ValueError(msg)
    return label, int(offset)


def open_store(storage: Path | None) -> SongStore:
    """Open the store at ``storage``, or where the settings file points."""
    if storage is not None:
        return SongStore(StorageRoot(storage))

    app_dir = default_app_dir()
    settings = SettingsStore.in_dir(app_dir).load()
    root = resolve_storage_root(settings, app_dir)
    logger.debug("Using storage root %s", root.path)
    return SongStore(root)


def cmd_list(args: argparse.Namespace) -> int:
    for meta in open_store(args.storage).list_songs():
        suffix = f" - {meta.artist}" if meta.artist else ""
        print(f"{meta.id}  {meta.title}{suffix}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    song = open_store(args.storage).get_song(args.song_id)
    if song is None:
        print(f"Error: Song not found: {args.song_id}", file=sys.stderr)
        return 1
    sys.stdout.write(render_song(song))
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    text = args.input.read_text(encoding="utf-8")
    if args.rendered:
        song = parse_song_text(text)
    else:
        song = import_song(text, title=args.title or args.input.stem, artist=args.artist)
    open_store(args.storage).save_song(song)
    print(song.id)
    return 0


def cmd_delete(args: argparse.Namespace) -> int:
    open_store(args.storage).delete_song(args.song_id)
    return 0


def cmd_tab(args: argparse.Namespace) -> int:
    block = TabBlock(id=new_id())
    try:
        for note in args.notes:
            block = add_note(block, parse_note_arg(note))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n".join(preview_block(block)))
    return 0


def cmd_chords(args: argparse.Namespace) -> int:
    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    lyrics = args.input.read_text(encoding="utf-8").rstrip("\n")
    block = ChordsLyricsBlock(id=new_id(), lyrics=lyrics)
    try:
        for chord in args.chord:
            block = add_chord(block, *parse_chord_arg(chord))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n".join(preview_block(block)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabnotes",
        description="Browse, import and render songs as monospaced text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list
  %(prog)s import testdata/simple_pair.txt --title "Hello" --artist "Anon"
  %(prog)s --storage /tmp/songs list
  %(prog)s tab 1:3 1:5,2:12
        """,
    )
    parser.add_argument(
        "--storage",
        type=Path,
        default=None,
        help="Song directory (default: from the settings file)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List stored songs")
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("show", help="Render a stored song")
    p.add_argument("song_id")
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("import", help="Import a plain-text chord sheet")
    p.add_argument("input", type=Path, help="Chord sheet file")
    p.add_argument("--title", default=None, help="Song title (default: file name)")
    p.add_argument("--artist", default="", help="Song artist")
    p.add_argument(
        "--rendered",
        action="store_true",
        help="Input is a song written by the show command (title and details included)",
    )
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("delete", help="Delete a stored song")
    p.add_argument("song_id")
    p.set_defaults(func=cmd_delete)

    p = sub.add_parser("tab", help="Render notes as tablature")
    p.add_argument("notes", nargs="*", help="Notes as string:fret pairs, e.g. 1:3,2:12")
    p.set_defaults(func=cmd_tab)

    p = sub.add_parser("chords", help="Render lyrics with chords above them")
    p.add_argument("input", type=Path, help="Lyrics file")
    p.add_argument(
        "--chord",
        action="append",
        default=[],
        help="Chord as label@offset, e.g. Am@6 (repeatable)",
    )
    p.set_defaults(func=cmd_chords)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        return args.func(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
