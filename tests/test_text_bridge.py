"""YAML text bridge tests: binary -> text -> binary with and without labels."""

import struct

import pytest
import yaml

from smashsound.Enums import FileKind
from smashsound.Errors import TextParseError
from smashsound.Helpers import hash40
from smashsound.Labels import Hash40, LabelRegistry
from smashsound.TextBridge import detect_kind, from_text, to_text
from smashsound.formats.BgmProperty import BgmPropertyFile
from smashsound.formats.SoundLabelInfo import SliFile
from smashsound.formats.structs.BgmEntry import BgmEntry


def _labels(*names) -> LabelRegistry:
    labels = LabelRegistry()
    for name in names:
        labels.add(name)
    return labels


def _sli_bytes(records) -> bytes:
    data = b"SLI\x00" + struct.pack("<I", len(records))
    for name, bank, tone in records:
        data += struct.pack("<QII", name, bank, tone)
    return data


def test_sli_text_uses_labels_and_hex():
    labels = _labels("se_common_jump")
    data = _sli_bytes([(hash40("se_common_jump"), 3, 4), (0xABCDEF, 5, 6)])
    text = to_text(SliFile.from_bytes(data), labels)

    document = yaml.safe_load(text)
    assert document == {
        "entries": [
            {"tone_name": "se_common_jump", "nus3bank_id": 3, "tone_id": 4},
            {"tone_name": "0xabcdef", "nus3bank_id": 5, "tone_id": 6},
        ]
    }


def test_sli_round_trip_through_text():
    labels = _labels("se_a", "se_b")
    data = _sli_bytes(sorted([(hash40("se_a"), 1, 2), (hash40("se_b"), 3, 4), (0x77, 5, 6)]))
    sli = SliFile.from_bytes(data)

    again = from_text(to_text(sli, labels), labels)
    assert isinstance(again, SliFile)
    assert again == sli
    assert again.to_bytes() == data


def test_sli_round_trip_reorders_unsorted_input():
    data = _sli_bytes([(0x30, 1, 1), (0x10, 2, 2)])
    labels = LabelRegistry()
    again = from_text(to_text(SliFile.from_bytes(data), labels), labels)
    assert again.to_bytes() == _sli_bytes([(0x10, 2, 2), (0x30, 1, 1)])


def test_text_round_trip_independent_of_labels():
    data = _sli_bytes([(hash40("se_a"), 1, 2)])
    sli = SliFile.from_bytes(data)
    # Rendered with labels, parsed without them: the label string is hashed again
    text = to_text(sli, _labels("se_a"))
    assert from_text(text, LabelRegistry()).to_bytes() == data


def test_versioned_sli_keeps_version_in_text():
    sli = SliFile([], version=1)
    text = to_text(sli, LabelRegistry())
    assert yaml.safe_load(text) == {"version": 1, "entries": []}
    assert from_text(text, LabelRegistry()).version == 1


def test_bgm_round_trip_through_text():
    labels = _labels("bgm_crs_01")
    bgm = BgmPropertyFile(
        [
            BgmEntry(Hash40(hash40("bgm_crs_01")), 1, 100, 2, 9000, 3, 9500),
            BgmEntry(Hash40(0x5), padding=b"\x01\x02\x03\x04"),
        ]
    )
    text = to_text(bgm, labels)
    document = yaml.safe_load(text)
    assert isinstance(document, list)
    assert document[0]["name_id"] == "bgm_crs_01"
    assert "padding" not in document[0]
    assert document[1]["padding"] == "01020304"

    again = from_text(text, labels)
    assert isinstance(again, BgmPropertyFile)
    assert again == bgm
    assert again.to_bytes() == bgm.to_bytes()


def test_bgm_accepts_legacy_unk_key():
    text = "- name_id: '0x10'\n  unk: 7\n  loop_start_sample: 0\n  unk_sample: 0\n  loop_end_sample: 0\n  unk2: 0\n  total_samples: 0\n"
    bgm = from_text(text, LabelRegistry())
    assert bgm.entries[0].unk1 == 7


def test_unquoted_hex_identifier_is_a_raw_hash():
    text = "entries:\n- tone_name: 0x1234\n  nus3bank_id: 1\n  tone_id: 2\n"
    sli = from_text(text, LabelRegistry())
    assert sli.entries[0].tone_name == Hash40(0x1234)


def test_detect_kind():
    assert detect_kind({"entries": []}) is FileKind.SLI
    assert detect_kind([]) is FileKind.BGM_PROPERTY
    with pytest.raises(TextParseError):
        detect_kind("just a string")


@pytest.mark.parametrize(
    "text",
    [
        "entries: [\n",
        "entries:\n- tone_name: se_a\n  nus3bank_id: 1\n",
        "entries:\n- tone_name: se_a\n  nus3bank_id: -1\n  tone_id: 0\n",
        "entries:\n- tone_name: se_a\n  nus3bank_id: 4294967296\n  tone_id: 0\n",
        "entries:\n- tone_name: 0xzz\n  nus3bank_id: 1\n  tone_id: 0\n",
        "entries:\n- [1, 2, 3]\n",
        "42\n",
    ],
)
def test_malformed_text(text):
    with pytest.raises(TextParseError):
        from_text(text, LabelRegistry())


def test_explicit_kind_rejects_wrong_shape():
    with pytest.raises(TextParseError):
        from_text("entries: []\n", LabelRegistry(), FileKind.BGM_PROPERTY)


def test_hex_like_label_round_trips():
    labels = _labels("0x1")
    data = _sli_bytes(sorted([(hash40("0x1"), 1, 2), (0x1, 3, 4)]))
    text = to_text(SliFile.from_bytes(data), labels)
    assert from_text(text, labels).to_bytes() == data
