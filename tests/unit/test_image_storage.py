"""Tests for local review image storage."""

from pathlib import Path

from tripdesigner.app.reviews.storage import LocalImageStorage


def test_save_writes_file_and_returns_public_path(tmp_path: Path) -> None:
    """Test image bytes land under images/ with a unique prefix."""
    storage = LocalImageStorage(tmp_path)

    public_path = storage.save("gondola.jpg", b"\xff\xd8jpeg")

    assert public_path.startswith("/images/")
    assert public_path.endswith("_gondola.jpg")
    stored = storage.images_dir / public_path.rsplit("/", 1)[-1]
    assert stored.read_bytes() == b"\xff\xd8jpeg"


def test_save_strips_client_directories(tmp_path: Path) -> None:
    """Test only the base file name is kept."""
    storage = LocalImageStorage(tmp_path)

    posix = storage.save("../../etc/passwd.png", b"a")
    windows = storage.save("C:\\Users\\me\\Pictures\\canal.png", b"b")

    assert posix.endswith("_passwd.png")
    assert windows.endswith("_canal.png")
    assert sorted(p.name for p in storage.images_dir.iterdir()) == sorted(
        [posix.rsplit("/", 1)[-1], windows.rsplit("/", 1)[-1]]
    )


def test_save_same_name_twice_keeps_both(tmp_path: Path) -> None:
    """Test repeated uploads of the same name do not overwrite each other."""
    storage = LocalImageStorage(tmp_path)

    first = storage.save("photo.png", b"1")
    second = storage.save("photo.png", b"2")

    assert first != second
    assert len(list(storage.images_dir.iterdir())) == 2


def test_delete_removes_stored_image(tmp_path: Path) -> None:
    """Test delete takes the public path returned by save."""
    storage = LocalImageStorage(tmp_path)
    public_path = storage.save("photo.png", b"1")

    storage.delete(public_path)
    storage.delete(public_path)

    assert list(storage.images_dir.iterdir()) == []
