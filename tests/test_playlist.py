import random

import pytest

from tunelist.playlist import (
    NOTES,
    NOTES_PER_SONG,
    InvalidNote,
    Playlist,
    PlaylistError,
    Position,
    Song,
    SongNotFound,
    random_notes,
    random_song_id,
)

ALPHA_NOTES = ["do", "re", "mi", "fa", "sol", "la", "ti"] * 3
BETA_NOTES = ["la"] * 21


def _write_csv(path, rows):
    header = "Song," + ",".join(f"N{i}" for i in range(1, 22))
    lines = [header] + [",".join([name] + notes) for name, notes in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def loaded(tmp_path):
    csv_path = _write_csv(
        tmp_path / "tunes.csv", [("Alpha", ALPHA_NOTES), ("Beta", BETA_NOTES)]
    )
    playlist = Playlist(random.Random(7))
    count = playlist.load_csv(csv_path)
    return playlist, count


def test_position_values_match_menu_choices():
    assert Position(1) is Position.BEGINNING
    assert Position(2) is Position.END


def test_load_csv_counts_and_keeps_order(loaded):
    playlist, count = loaded
    assert count == 2
    assert len(playlist) == 2
    assert [song.name for song in playlist] == ["Alpha", "Beta"]
    assert list(next(iter(playlist)).notes) == ALPHA_NOTES


def test_load_csv_ids_in_range(loaded):
    playlist, _ = loaded
    for song in playlist:
        assert len(song.name) <= song.song_id <= 1000 + len(song.name)


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Playlist().load_csv(tmp_path / "absent.csv")


def test_load_csv_short_row(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("header\nSong,do,re\n", encoding="utf-8")
    with pytest.raises(PlaylistError):
        Playlist().load_csv(path)


def test_load_csv_appends(loaded, tmp_path):
    playlist, _ = loaded
    path = _write_csv(tmp_path / "more.csv", [("Gamma", BETA_NOTES)])
    assert playlist.load_csv(path) == 1
    assert [song.name for song in playlist][-1] == "Gamma"


def test_random_notes_are_valid():
    notes = random_notes(random.Random(3))
    assert len(notes) == NOTES_PER_SONG
    assert set(notes) <= set(NOTES)


def test_random_song_id_range():
    rng = random.Random(11)
    for _ in range(200):
        assert 5 <= random_song_id("hello", rng) <= 1005


def test_add_song_beginning_and_end(loaded):
    playlist, _ = loaded
    first = playlist.add_song("Intro", Position.BEGINNING)
    last = playlist.add_song("Outro", 2)
    songs = list(playlist)
    assert songs[0] == first
    assert songs[-1] == last
    assert len(playlist) == 4


def test_add_song_to_empty_playlist_at_end():
    playlist = Playlist(random.Random(1))
    song = playlist.add_song("Solo", Position.END)
    assert list(playlist) == [song]


def test_add_song_invalid_position():
    playlist = Playlist()
    with pytest.raises(ValueError):
        playlist.add_song("Nope", 3)
    assert len(playlist) == 0


def test_add_song_truncates_name_and_newline():
    playlist = Playlist(random.Random(2))
    song = playlist.add_song("x" * 40 + "\n")
    assert song.name == "x" * 24
    assert "\n" not in playlist.add_song("Tune\n").name


def test_find_by_id_and_name(loaded):
    playlist, _ = loaded
    beta = list(playlist)[1]
    assert playlist.find_by_id(beta.song_id) == beta
    assert playlist.find_by_name("Beta\n") == beta


def test_find_missing_raises(loaded):
    playlist, _ = loaded
    with pytest.raises(SongNotFound):
        playlist.find_by_id(-5)
    with pytest.raises(SongNotFound):
        playlist.find_by_name("Nobody")


def test_count_note(loaded):
    playlist, _ = loaded
    alpha, beta = list(playlist)
    assert playlist.count_note(alpha.song_id, "do") == ALPHA_NOTES.count("do")
    assert playlist.count_note(beta.song_id, "la\n") == len(BETA_NOTES)
    assert playlist.count_note(beta.song_id, "mi") == 0


def test_count_note_invalid_note_checked_first(loaded):
    playlist, _ = loaded
    with pytest.raises(InvalidNote):
        playlist.count_note(-5, "xx")


def test_count_note_missing_song(loaded):
    playlist, _ = loaded
    with pytest.raises(SongNotFound):
        playlist.count_note(-5, "do")


def test_remove(loaded):
    playlist, _ = loaded
    alpha = list(playlist)[0]
    assert playlist.remove(alpha.song_id) == alpha
    assert [song.name for song in playlist] == ["Beta"]
    with pytest.raises(SongNotFound):
        playlist.remove(alpha.song_id) if alpha.song_id != list(playlist)[0].song_id else playlist.remove(-1)


def test_remove_from_empty():
    with pytest.raises(SongNotFound):
        Playlist().remove(1)


def test_clear(loaded):
    playlist, _ = loaded
    playlist.clear()
    assert len(playlist) == 0
    assert playlist.render() == ""


def test_song_render():
    song = Song(42, "Alpha", tuple(ALPHA_NOTES))
    text = song.render()
    assert text.splitlines()[0] == "Song ID: 42"
    assert text.splitlines()[1] == "Song Name: Alpha"
    assert text.splitlines()[2] == "Notes: " + ".".join(ALPHA_NOTES)


def test_playlist_render_contains_every_song(loaded):
    playlist, _ = loaded
    text = playlist.render()
    for song in playlist:
        assert song.render() in text
    assert text.count("Song ID: ") == len(playlist)