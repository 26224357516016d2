import pytest
from Registry import Registry, RegistryParse

from app_usage import config, hive_store
from app_usage.codec import LayoutVersion, encode
from app_usage.enumerator import Enumerator, storage_path
from app_usage.errors import OsOperationError, StorageNotFoundError

EXE_PATH = storage_path(config.MODERN_LOCATIONS[0])


class FakeValue:
    def __init__(self, name, data):
        self._name = name
        self._data = data

    def name(self):
        return self._name

    def raw_data(self):
        return self._data


class FakeKey:
    def __init__(self, values):
        self._values = values

    def values(self):
        return list(self._values)


class FakeRegistry:
    keys = {}

    def __init__(self, path):
        if path == "broken.dat":
            raise RegistryParse.ParseException("Invalid REGF ID")
        if path == "missing.dat":
            raise FileNotFoundError(2, "No such file or directory")
        self.path = path

    def open(self, path):
        if path not in self.keys:
            raise Registry.RegistryKeyNotFoundException(path)
        return FakeKey(self.keys[path])


@pytest.fixture
def fake_registry(monkeypatch):
    FakeRegistry.keys = {
        EXE_PATH: [
            FakeValue("P:\\Jvaqbjf\\abgrcnq.rkr", encode(2, 0x01D0000000000000, LayoutVersion.MODERN)),
            FakeValue("x" * 200, b"\x00" * 300),
        ],
    }
    monkeypatch.setattr(hive_store.Registry, "Registry", FakeRegistry)
    return FakeRegistry


def test_open_and_read(fake_registry):
    store = hive_store.HiveStore("NTUSER.DAT")
    handle = store.open(EXE_PATH + "\\")

    assert store.info(handle).value_count == 2
    assert store.enumerate_at(handle, 0, 64, 128)[0] == "P:\\Jvaqbjf\\abgrcnq.rkr"
    store.close(handle)


def test_capacity_protocol(fake_registry):
    store = hive_store.HiveStore("NTUSER.DAT")
    handle = store.open(EXE_PATH)

    with pytest.raises(hive_store.InsufficientBufferError) as excinfo:
        store.enumerate_at(handle, 1, 64, 128)

    assert excinfo.value.name_hint == 201
    assert excinfo.value.value_hint == 300
    assert store.enumerate_at(handle, 1, 201, 300) == ("x" * 200, b"\x00" * 300)


def test_index_past_end(fake_registry):
    store = hive_store.HiveStore("NTUSER.DAT")
    handle = store.open(EXE_PATH)

    with pytest.raises(OsOperationError) as excinfo:
        store.enumerate_at(handle, 2, 64, 128)
    assert excinfo.value.code == 259


def test_missing_key(fake_registry):
    store = hive_store.HiveStore("NTUSER.DAT")

    with pytest.raises(StorageNotFoundError):
        store.open("Software\\Nope")


def test_bad_hive_files(fake_registry):
    with pytest.raises(OsOperationError) as excinfo:
        hive_store.HiveStore("broken.dat")
    assert excinfo.value.code == 1009

    with pytest.raises(StorageNotFoundError):
        hive_store.HiveStore("missing.dat")


def test_enumerator_over_hive(fake_registry):
    store = hive_store.HiveStore("NTUSER.DAT")
    enumerator = Enumerator(store, LayoutVersion.MODERN, skip_missing=True)

    catalog = enumerator.enumerate()

    assert catalog.size() == 2
    assert catalog.name(0) == "C:\\Windows\\notepad.exe"
    assert catalog.counter(0) == 2
    assert catalog.name(1) == "k" * 200
    assert catalog.counter(1) == 0


def test_info_reports_longest_name_and_value(fake_registry):
    store = hive_store.HiveStore("NTUSER.DAT")
    handle = store.open(EXE_PATH)

    info = store.info(handle)

    assert info.max_name_chars == 200
    assert info.max_value_bytes == 300
