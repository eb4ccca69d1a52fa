"""Interactive menu for managing a playlist."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import TextIO

from tunelist.playlist import (
    InvalidNote,
    Playlist,
    PlaylistError,
    Position,
    SongNotFound,
)

DEFAULT_CSV = "src/MusicalTunes.csv"
RULE = "=" * 54

MENU = (
    f"\n{RULE}\n"
    "1. Create a new playlist\n"
    "2. Add a new song to an existing playlist\n"
    "3. Play all songs in the given playlist\n"
    "4. Play a song from the playlist, given its id\n"
    "5. Play a song from the playlist, given its name\n"
    "6. Count the number of occurrences of a note in a given song\n"
    "7. Delete a song from the playlist, given its id\n"
    "8. Delete the entire playlist\n"
    "9. Exit\n"
    f"{RULE}\n"
)
INVALID_CHOICE = "Invalid input. Please enter a number between 1 and 9.\n"


class _EndOfInput(Exception):
    pass


class _Menu:
    def __init__(self, playlist: Playlist, csv_path, stdin: TextIO, stdout: TextIO):
        self.playlist = playlist
        self.csv_path = csv_path
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> int | None:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            self.write(INVALID_CHOICE)
            return None

    def create(self) -> None:
        try:
            added = self.playlist.load_csv(self.csv_path)
        except OSError:
            self.write("Could not open the playlist file.")
            self.write("\nPlaylist creation unsuccessful!")
            added = -1
        except PlaylistError as error:
            self.write(f"{error}")
            self.write("\nPlaylist creation unsuccessful!")
            added = -1
        else:
            self.write("\nPlaylist created successfully!")
        self.write(f"\n{added} songs added!\n")

    def add(self) -> None:
        where = self.ask_int("\nEnter your choice for beginOrEnd: ")
        if where is None:
            return
        name = self.ask("Enter the name of the song: ")
        try:
            position = Position(where)
        except ValueError:
            self.write("\nInvalid beginOrEnd value!")
            self.write("\nUnable to add to playlist!")
            return
        song = self.playlist.add_song(name, position)
        label = "beginning" if position is Position.BEGINNING else "end"
        self.write(f"\nSong added at the {label}!")
        self.write(f"\nSong ID: {song.song_id}")
        self.write(f"\nSong Name: {song.name}")
        self.write("\nNotes: " + "".join(f"{note} " for note in song.notes))

    def play_all(self) -> None:
        for song in self.playlist:
            self.write(f"\n{song.render()}\n")

    def play_by_id(self) -> None:
        song_id = self.ask_int("\nEnter the ID of the song you want to play: ")
        if song_id is None:
            return
        try:
            self.write(f"\n{self.playlist.find_by_id(song_id).render()}\n")
        except SongNotFound:
            self.write("\nNo song found!")

    def play_by_name(self) -> None:
        name = self.ask("\nEnter the name of the song you want to play: ")
        try:
            self.write(f"\n{self.playlist.find_by_name(name).render()}\n")
        except SongNotFound:
            self.write("\nNo song found!")

    def count(self) -> None:
        song_id = self.ask_int(
            "\nEnter the ID of the song you want to count notes in: "
        )
        if song_id is None:
            return
        note = self.ask("\nEnter the note that you want to count: ")
        try:
            occurrences = self.playlist.count_note(song_id, note.strip())
        except InvalidNote:
            self.write("\nInvalid note!")
        except SongNotFound:
            self.write("Song not found!")
        else:
            self.write(f"\nThis note appears {occurrences} times in the song.")

    def delete_one(self) -> None:
        song_id = self.ask_int("\nEnter the ID of the song you want to delete: ")
        if song_id is None:
            return
        try:
            self.playlist.remove(song_id)
        except SongNotFound:
            self.write("\nSong not found!")
        else:
            self.write("\nSong deleted!")

    def delete_all(self) -> None:
        self.playlist.clear()
        self.write("\nDeleting Playlist...")

    def run(self) -> None:
        actions = {
            1: self.create,
            2: self.add,
            3: self.play_all,
            4: self.play_by_id,
            5: self.play_by_name,
            6: self.count,
            7: self.delete_one,
            8: self.delete_all,
        }
        try:
            while True:
                self.write(MENU)
                choice = self.ask_int("Enter your choice: ")
                if choice is None:
                    continue
                if choice == 9:
                    self.write("Exiting the program...")
                    return
                action = actions.get(choice)
                if action is None:
                    self.write(INVALID_CHOICE)
                else:
                    action()
        except _EndOfInput:
            return


def run_menu(playlist: Playlist, csv_path, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user exits or input ends."""
    _Menu(playlist, csv_path, stdin, stdout).run()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive playlist menu."""
    parser = argparse.ArgumentParser(description="Manage a playlist of songs.")
    parser.add_argument(
        "csv_path", nargs="?", default=DEFAULT_CSV, type=Path,
        help="CSV file the playlist is created from",
    )
    parser.add_argument("--seed", type=int, help="seed for song ids and notes")
    args = parser.parse_args(argv)
    playlist = Playlist(random.Random(args.seed))
    run_menu(playlist, args.csv_path, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())