# tunelist

A small interactive playlist manager for songs written in solfège.
Each song has a name, a numeric id and 21 notes. The seven known notes
are `do re mi fa sol la ti`.

## Installing

```
pip install .
```

## Using the menu

```
tunelist [CSV_PATH] [--seed N]
```

`CSV_PATH` is the file that option 1 loads songs from. It defaults to
`src/MusicalTunes.csv`. `--seed` seeds the random generator that makes
song ids and notes, so that a session can be repeated.

The menu offers:

1. Create a new playlist. The songs in the CSV file are appended to the
   playlist and their number is reported. If the file cannot be read or is
   malformed, `-1 songs added!` is reported.
2. Add a new song. Enter `1` to put it at the beginning or `2` to put it at
   the end, then its name. The name is cut to 24 characters and the song's
   21 notes are chosen at random.
3. Play every song in the playlist.
4. Play one song, chosen by its id.
5. Play one song, chosen by its exact name.
6. Count how often a note appears in a song, chosen by its id.
7. Delete a song, chosen by its id.
8. Delete the whole playlist.
9. Exit.

Input that is not a number gets the message `Invalid input. Please enter a
number between 1 and 9.` The menu also stops when its input ends.

"Playing" a song prints it as text:

```
Song ID: 412
Song Name: Twinkle
Notes: do.do.sol.sol.la.la.sol.fa.fa.mi.mi.re.re.do.sol.sol.fa.fa.mi.mi.re
```

### CSV format

The first line is a header and is skipped. Each following line holds a song
name and then its notes, all separated by commas. Blank lines and empty
fields are skipped. A line with fewer than a name and 21 notes is an error.
Fields after the 21st note are ignored.

```
name,n1,n2,...,n21
Twinkle,do,do,sol,sol,la,la,sol,fa,fa,mi,mi,re,re,do,sol,sol,fa,fa,mi,mi,re
```

Every song gets an id made of a random number from 0 to 1000 plus the
length of its name. Ids are not guaranteed to be unique. Lookups by id or by
name return the first match.

## Using the library

Everything lives in `tunelist.playlist`:

- `Playlist(rng=None)` is an ordered collection of `Song` objects. It takes
  an optional `random.Random`. It supports `len()` and iteration, and has
  these methods:
  - `load_csv(path)`
  - `add_song(name, position=Position.END)`
  - `find_by_id(song_id)` and `find_by_name(name)`
  - `count_note(song_id, note)`
  - `remove(song_id)`
  - `clear()`
  - `render()`
- `Song` is a frozen dataclass with `song_id`, `name` and `notes`.
  `render()` returns the song as text, with its notes joined by dots.
- `Position.BEGINNING` (1) and `Position.END` (2) choose where `add_song`
  inserts. Any other value raises `ValueError`.
- Errors:
  - `PlaylistError` is the base class, and is also raised for malformed CSV
    rows.
  - `SongNotFound` (also a `LookupError`) is raised when no song matches.
  - `InvalidNote` (also a `ValueError`) is raised when `count_note` gets a
    note that is not one of the seven.
- Helpers: `random_song_id(name, rng)` and `random_notes(rng)`.

```python
import random
from tunelist.playlist import Playlist, Position, SongNotFound

playlist = Playlist(random.Random(7))
playlist.load_csv("songs.csv")
song = playlist.add_song("My Tune", Position.END)
print(song.render())
print(playlist.count_note(song.song_id, "do"))

try:
    playlist.remove(-1)
except SongNotFound:
    print("no such song")
```

The menu loop can be driven from any text streams with
`tunelist.cli.run_menu(playlist, csv_path, stdin, stdout)`.

## What it does not do

- Songs are never played as sound. They are only printed as text.
- Changes are kept in memory only. The playlist is never written back to a
  file.

## Running the tests

```
pip install .[test]
pytest
```