import random

import pytest

from quetune.core.errors import (
    CorruptedPlaylistError,
    NotAPlaylistError,
    PlaylistError,
    PlaylistIOError,
)
from quetune.core.playlist import PlaylistStore
from quetune.core.playlist_store import (
    PLAYLIST_HEADER,
    format_playlist,
    parse_playlist,
    read_playlist_file,
    write_playlist_file,
)


class TestPlaylistStore:
    """Tests for the in-memory playlist."""

    def test_add_rejects_duplicates(self):
        store = PlaylistStore()
        assert store.add("/music/a.mp3") is True
        assert store.add("/music/a.mp3") is False
        assert store.paths == ["/music/a.mp3"]

    def test_extend_counts_new_only(self):
        store = PlaylistStore(["/a.mp3"])
        assert store.extend(["/a.mp3", "/b.mp3", "/c.mp3", "/b.mp3"]) == 2
        assert store.paths == ["/a.mp3", "/b.mp3", "/c.mp3"]

    def test_move_up_and_down(self):
        store = PlaylistStore(["/a", "/b", "/c"])
        assert store.move_up(2) is True
        assert store.paths == ["/a", "/c", "/b"]
        assert store.move_down(0) is True
        assert store.paths == ["/c", "/a", "/b"]

    def test_move_past_bounds_is_noop(self):
        store = PlaylistStore(["/a", "/b"])
        assert store.move_up(0) is False
        assert store.move_down(1) is False
        assert store.paths == ["/a", "/b"]

    def test_shuffle_is_permutation(self):
        paths = [f"/t{i}.mp3" for i in range(20)]
        store = PlaylistStore(paths, rng=random.Random(7))
        store.shuffle()
        assert sorted(store.paths) == sorted(paths)
        assert len(store) == 20

    def test_shuffle_single_and_empty(self):
        store = PlaylistStore(["/only.mp3"])
        store.shuffle()
        assert store.paths == ["/only.mp3"]
        empty = PlaylistStore()
        empty.shuffle()
        assert empty.paths == []

    def test_replace_keeps_list_identity(self):
        store = PlaylistStore(["/a"])
        ref = store.paths
        store.replace(["/x", "/y", "/x"])
        assert ref is store.paths
        assert ref == ["/x", "/y"]

    def test_get_out_of_bounds(self):
        store = PlaylistStore(["/a"])
        assert store.get(0) == "/a"
        assert store.get(1) is None
        assert store.get(-1) is None

    def test_display_name(self):
        assert PlaylistStore.display_name("/music/dir/song.mp3") == "song.mp3"


class TestPlaylistFormat:
    """Tests for the playlist file format."""

    def test_format(self):
        text = format_playlist(["/a/b.mp3", "/c d/e.flac"])
        assert text == f"{PLAYLIST_HEADER}\n2\n/a/b.mp3\n/c d/e.flac\n"

    def test_format_empty(self):
        assert format_playlist([]) == f"{PLAYLIST_HEADER}\n0\n"

    def test_parse(self):
        lines = [f"{PLAYLIST_HEADER}\n", "2\n", "/a.mp3\n", "/b.mp3\n"]
        assert parse_playlist(lines) == ["/a.mp3", "/b.mp3"]

    def test_parse_ignores_trailing_lines(self):
        lines = [f"{PLAYLIST_HEADER}\n", "1\n", "/a.mp3\n", "/extra.mp3\n"]
        assert parse_playlist(lines) == ["/a.mp3"]

    def test_parse_keeps_spaces(self):
        lines = [f"{PLAYLIST_HEADER}\n", "1\n", "/my music/ a .mp3 \n"]
        assert parse_playlist(lines) == ["/my music/ a .mp3 "]

    def test_bad_header(self):
        with pytest.raises(NotAPlaylistError, match="not a playlist"):
            parse_playlist(["#EXTM3U\n", "1\n", "/a.mp3\n"])

    def test_empty_file(self):
        with pytest.raises(NotAPlaylistError):
            parse_playlist([])

    def test_missing_count(self):
        with pytest.raises(CorruptedPlaylistError):
            parse_playlist([f"{PLAYLIST_HEADER}\n"])

    def test_non_numeric_count(self):
        with pytest.raises(CorruptedPlaylistError, match="corrupted"):
            parse_playlist([f"{PLAYLIST_HEADER}\n", "many\n"])

    def test_negative_count(self):
        with pytest.raises(CorruptedPlaylistError):
            parse_playlist([f"{PLAYLIST_HEADER}\n", "-1\n"])

    def test_too_few_paths(self):
        lines = [f"{PLAYLIST_HEADER}\n", "5\n", "/a\n", "/b\n", "/c\n"]
        with pytest.raises(CorruptedPlaylistError):
            parse_playlist(lines)

    def test_newline_in_path_rejected(self):
        with pytest.raises(PlaylistIOError):
            format_playlist(["/bad\nname.mp3"])


class TestPlaylistFiles:
    """Tests for reading and writing playlist files."""

    def test_save_then_load(self, temp_playlist_dir):
        target = temp_playlist_dir / "mix"
        store = PlaylistStore(["/m/a.mp3", "/m/b b.ogg", "/m/ü.flac"])
        store.save(target)

        assert target.read_text(encoding="utf-8").startswith(PLAYLIST_HEADER + "\n3\n")

        other = PlaylistStore()
        assert other.load(target) == 3
        assert other.paths == store.paths

    def test_save_overwrites(self, temp_playlist_dir):
        target = temp_playlist_dir / "mix"
        target.write_text("old contents")
        write_playlist_file(target, ["/x.mp3"])
        assert read_playlist_file(target) == ["/x.mp3"]
        assert sorted(p.name for p in temp_playlist_dir.iterdir()) == ["mix"]

    def test_load_missing_file(self, temp_playlist_dir):
        store = PlaylistStore(["/keep.mp3"])
        with pytest.raises(PlaylistIOError, match="file error"):
            store.load(temp_playlist_dir / "nope")
        assert store.paths == ["/keep.mp3"]

    def test_load_corrupted_leaves_store(self, temp_playlist_dir):
        target = temp_playlist_dir / "bad"
        target.write_text(f"{PLAYLIST_HEADER}\n5\n/a\n/b\n/c\n")
        store = PlaylistStore(["/keep.mp3"])
        with pytest.raises(PlaylistError):
            store.load(target)
        assert store.paths == ["/keep.mp3"]

    def test_save_into_missing_directory(self, temp_playlist_dir):
        with pytest.raises(PlaylistIOError):
            write_playlist_file(temp_playlist_dir / "no" / "such" / "dir", ["/a"])
