"""Playlist of songs made of solfège notes."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

NOTES: tuple[str, ...] = ("do", "re", "mi", "fa", "sol", "la", "ti")
NOTES_PER_SONG = 21
MAX_NAME_LENGTH = 24
MAX_RANDOM_ID = 1000


class Position(enum.IntEnum):
    """Where a new song goes in the playlist."""

    BEGINNING = 1
    END = 2


class PlaylistError(Exception):
    """Base class for playlist errors."""


class SongNotFound(PlaylistError, LookupError):
    """No song matches the requested id or name."""


class InvalidNote(PlaylistError, ValueError):
    """The note is not one of the seven known notes."""


@dataclass(frozen=True)
class Song:
    """A song: an id, a name and its notes."""

    song_id: int
    name: str
    notes: tuple[str, ...]

    def render(self) -> str:
        """Return the song as text, notes separated by dots."""
        return (
            f"Song ID: {self.song_id}\n"
            f"Song Name: {self.name}\n"
            f"Notes: {'.'.join(self.notes)}"
        )


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0]


def random_song_id(name: str, rng: random.Random) -> int:
    """Return a random id between 0 and 1000, offset by the name's length."""
    return rng.randint(0, MAX_RANDOM_ID) + len(name)


def random_notes(rng: random.Random) -> tuple[str, ...]:
    """Return a random sequence of notes of a song's length."""
    return tuple(rng.choice(NOTES) for _ in range(NOTES_PER_SONG))


class Playlist:
    """An ordered collection of songs."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._songs: list[Song] = []

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))

    def __len__(self) -> int:
        return len(self._songs)

    def load_csv(self, path: str | Path) -> int:
        """Append the songs from a CSV file; return how many were added.

        The first line is a header. Each row holds a song name followed by
        its notes. Empty fields are skipped.
        """
        added = 0
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line_number, line in enumerate(handle, start=2):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                fields = [field for field in line.split(",") if field]
                if len(fields) < NOTES_PER_SONG + 1:
                    raise PlaylistError(
                        f"line {line_number}: expected a name and "
                        f"{NOTES_PER_SONG} notes, got {len(fields)} fields"
                    )
                name = fields[0]
                notes = tuple(fields[1 : NOTES_PER_SONG + 1])
                self._songs.append(
                    Song(random_song_id(name, self._rng), name, notes)
                )
                added += 1
        return added

    def add_song(self, name: str, position: Position | int = Position.END) -> Song:
        """Create a song with random notes and insert it; return the song."""
        try:
            position = Position(position)
        except ValueError:
            raise ValueError(f"invalid position: {position!r}") from None
        name = _first_line(name)[:MAX_NAME_LENGTH]
        song = Song(
            random_song_id(name, self._rng), name, random_notes(self._rng)
        )
        if position is Position.BEGINNING:
            self._songs.insert(0, song)
        else:
            self._songs.append(song)
        return song

    def find_by_id(self, song_id: int) -> Song:
        """Return the first song with this id."""
        for song in self._songs:
            if song.song_id == song_id:
                return song
        raise SongNotFound(f"no song with id {song_id}")

    def find_by_name(self, name: str) -> Song:
        """Return the first song with this exact name."""
        name = _first_line(name)
        for song in self._songs:
            if song.name == name:
                return song
        raise SongNotFound(f"no song named {name!r}")

    def count_note(self, song_id: int, note: str) -> int:
        """Count how often a note occurs in the song with this id."""
        note = _first_line(note)
        if note not in NOTES:
            raise InvalidNote(f"invalid note: {note!r}")
        return self.find_by_id(song_id).notes.count(note)

    def remove(self, song_id: int) -> Song:
        """Remove and return the first song with this id."""
        song = self.find_by_id(song_id)
        self._songs.remove(song)
        return song

    def clear(self) -> None:
        """Remove every song."""
        self._songs.clear()

    def render(self) -> str:
        """Return every song as text, songs separated by a blank line."""
        return "\n\n".join(song.render() for song in self._songs)

    @staticmethod
    def note_names() -> Sequence[str]:
        return NOTES