"""Binary read/write tests for soundlabelinfo.sli containers."""

import struct

import pytest

from smashsound.Errors import MagicMismatch, TruncatedInput
from smashsound.Helpers import hash40
from smashsound.Labels import Hash40
from smashsound.formats.SoundLabelInfo import SliFile
from smashsound.formats.structs.ToneEntry import SliEntry


def _sli_bytes(records, version=None) -> bytes:
    data = b"SLI\x00"
    if version is not None:
        data += struct.pack("<I", version)
    data += struct.pack("<I", len(records))
    for name, bank, tone in records:
        data += struct.pack("<QII", name, bank, tone)
    return data


def test_single_entry_decodes_and_reencodes():
    data = b"SLI\x00" + struct.pack("<I", 1) + struct.pack("<QII", 0x1234, 1, 2)
    sli = SliFile.from_bytes(data)
    assert len(sli.entries) == 1
    entry = sli.entries[0]
    assert entry.tone_name == Hash40(0x1234)
    assert entry.nus3bank_id == 1
    assert entry.tone_id == 2
    assert sli.version is None
    assert sli.to_bytes() == data


def test_sorted_input_round_trips_exactly():
    data = _sli_bytes([(0x10, 1, 1), (0x20, 1, 2), (0x30, 2, 0)])
    assert SliFile.from_bytes(data).to_bytes() == data


def test_unsorted_input_is_sorted_on_write_only():
    data = _sli_bytes([(0x30, 3, 3), (0x10, 1, 1), (0x20, 2, 2)])
    sli = SliFile.from_bytes(data)
    # Read order is kept in memory
    assert [int(e.tone_name) for e in sli.entries] == [0x30, 0x10, 0x20]

    out = sli.to_bytes()
    assert out == _sli_bytes([(0x10, 1, 1), (0x20, 2, 2), (0x30, 3, 3)])
    # Writing does not reorder the stored list
    assert [int(e.tone_name) for e in sli.entries] == [0x30, 0x10, 0x20]

    presorted = SliFile(sorted(sli.entries, key=lambda e: e.tone_name))
    assert presorted.to_bytes() == out


def test_count_is_derived_from_entries():
    sli = SliFile([SliEntry(Hash40(5), 0, 0), SliEntry(Hash40(1), 0, 0)])
    data = sli.to_bytes()
    assert struct.unpack_from("<I", data, 4)[0] == 2
    assert len(data) == 8 + 2 * 16

    sli.entries.append(SliEntry(Hash40(3), 0, 0))
    assert struct.unpack_from("<I", sli.to_bytes(), 4)[0] == 3


def test_empty_container():
    data = _sli_bytes([])
    sli = SliFile.from_bytes(data)
    assert sli.entries == []
    assert sli.to_bytes() == data


def test_versioned_header_round_trips():
    data = _sli_bytes([(0x20, 7, 8), (0x10, 5, 6)], version=1)
    sli = SliFile.from_bytes(data)
    assert sli.version == 1
    assert [int(e.tone_name) for e in sli.entries] == [0x20, 0x10]
    assert sli.to_bytes() == _sli_bytes([(0x10, 5, 6), (0x20, 7, 8)], version=1)


def test_truncated_mid_record():
    data = b"SLI\x00" + struct.pack("<I", 1) + struct.pack("<QII", 0x1234, 1, 2)[:12]
    with pytest.raises(TruncatedInput):
        SliFile.from_bytes(data)


def test_truncated_count_field():
    with pytest.raises(TruncatedInput):
        SliFile.from_bytes(b"SLI\x00\x01\x00")


def test_declared_count_larger_than_data():
    data = b"SLI\x00" + struct.pack("<I", 3) + struct.pack("<QII", 1, 1, 1)
    with pytest.raises(TruncatedInput) as excinfo:
        SliFile.from_bytes(data)
    assert excinfo.value.needed == 8 + 3 * 16


@pytest.mark.parametrize("data", [b"PMGB\x00\x00\x00\x00", b"SLI", b"", b"sli\x00\x00\x00\x00\x00"])
def test_wrong_magic(data):
    with pytest.raises(MagicMismatch) as excinfo:
        SliFile.from_bytes(data)
    assert excinfo.value.expected == b"SLI\x00"


def test_fresh_entries_from_labels():
    sli = SliFile([SliEntry(Hash40.from_string("se_common_jump"), 12, 3)])
    data = sli.to_bytes()
    assert struct.unpack_from("<QII", data, 8) == (hash40("se_common_jump"), 12, 3)


def test_open_and_save(tmp_path):
    src = tmp_path / "soundlabelinfo.sli"
    src.write_bytes(_sli_bytes([(0x1, 2, 3)]))
    sli = SliFile.open(src)
    out = tmp_path / "out.sli"
    sli.save(out)
    assert out.read_bytes() == src.read_bytes()


def test_truncated_versioned_file():
    data = _sli_bytes([(0x10, 1, 1), (0x20, 2, 2), (0x30, 3, 3), (0x40, 4, 4), (0x50, 5, 5)], version=1)
    with pytest.raises(TruncatedInput):
        SliFile.from_bytes(data[:-4])


def test_versioned_file_with_trailing_bytes():
    data = _sli_bytes([(0x10, 1, 1), (0x20, 2, 2), (0x30, 3, 3)], version=1)
    sli = SliFile.from_bytes(data + b"\x00" * 4)
    assert sli.version == 1
    assert [int(e.tone_name) for e in sli.entries] == [0x10, 0x20, 0x30]
    assert sli.to_bytes() == data
