import os
import zlib

from sfv_verify.logic import verify_sfv


def test_pass(write_sfv):
    sfv = write_sfv({"a.bin": b"alpha", "b.bin": b"beta"})
    assert verify_sfv(sfv) == {"status": "PASS", "error_count": 0, "errors": []}


def test_crc_mismatch_reports_expected_and_computed(write_sfv):
    sfv = write_sfv({"a.bin": b"alpha"}, crcs={"a.bin": 0xDEADBEEF})
    result = verify_sfv(sfv)
    assert result["status"] == "FAIL"
    assert result["error_count"] == 1
    err = result["errors"][0]
    assert err["code"] == "E_CRC_MISMATCH"
    assert err["filename"] == "a.bin"
    assert err["expected"] == "deadbeef"
    assert err["computed"] == f"{zlib.crc32(b'alpha'):08x}"


def test_mismatch_stops_before_missing_file(write_sfv):
    sfv = write_sfv({"a.bin": b"alpha", "gone.bin": None}, crcs={"a.bin": 0})
    assert verify_sfv(sfv)["errors"][0]["code"] == "E_CRC_MISMATCH"


def test_missing_data_file_is_io_error(write_sfv):
    sfv = write_sfv({"gone.bin": None})
    err = verify_sfv(sfv)["errors"][0]
    assert err["code"] == "E_FILE_IO"
    assert err["filename"] == "gone.bin"


def test_preflight_reports_missing_before_hashing(write_sfv):
    # Without preflight the mismatch on a.bin would be reported first.
    sfv = write_sfv({"a.bin": b"alpha", "gone.bin": None}, crcs={"a.bin": 0})
    err = verify_sfv(sfv, preflight=True)["errors"][0]
    assert err["code"] == "E_FILE_MISSING"
    assert err["filename"] == "gone.bin"


def test_malformed_manifest(write_sfv):
    sfv = write_sfv({"a.bin": b"alpha"}, extra="onlyfilename\n")
    err = verify_sfv(sfv)["errors"][0]
    assert err["code"] == "E_MALFORMED_ENTRY"
    assert err["line"] == "onlyfilename"
    assert err["lineno"] == 3


def test_invalid_checksum(write_sfv):
    sfv = write_sfv({}, extra="a.bin 1ffffffff\n")
    err = verify_sfv(sfv)["errors"][0]
    assert err["code"] == "E_INVALID_CHECKSUM"
    assert err["token"] == "1ffffffff"


def test_empty_manifest(write_sfv):
    err = verify_sfv(write_sfv({}))["errors"][0]
    assert err["code"] == "E_EMPTY_MANIFEST"


def test_unreadable_manifest(tmp_path):
    err = verify_sfv(tmp_path / "nope.sfv")["errors"][0]
    assert err["code"] == "E_MANIFEST_IO"


def test_all_entries_lists_every_failure(write_sfv, tmp_path):
    sfv = write_sfv(
        {"a.bin": b"alpha", "b.bin": b"beta", "gone.bin": None, "d.bin": b"delta"},
        crcs={"b.bin": 0xDEADBEEF},
    )
    result = verify_sfv(sfv, all_entries=True)
    assert result["status"] == "FAIL"
    assert result["error_count"] == 2
    assert [(e["code"], e["filename"]) for e in result["errors"]] == [
        ("E_CRC_MISMATCH", "b.bin"),
        ("E_FILE_IO", "gone.bin"),
    ]
    assert result["errors"][1]["path"] == str(tmp_path / "gone.bin")


def test_all_entries_pass(write_sfv):
    sfv = write_sfv({"a.bin": b"alpha", "b.bin": b"beta"})
    assert verify_sfv(sfv, all_entries=True)["status"] == "PASS"


def test_all_entries_with_preflight_lists_every_missing_file(write_sfv):
    sfv = write_sfv({"gone1.bin": None, "a.bin": b"alpha", "gone2.bin": None})
    result = verify_sfv(sfv, preflight=True, all_entries=True)
    assert [e["filename"] for e in result["errors"]] == ["gone1.bin", "gone2.bin"]
    assert {e["code"] for e in result["errors"]} == {"E_FILE_MISSING"}


def test_undecodable_filename_is_escaped(tmp_path):
    (tmp_path / os.fsdecode(b"caf\xe9.bin")).write_bytes(b"x")
    sfv = tmp_path / "m.sfv"
    sfv.write_bytes(b"caf\xe9.bin 00000000\n")

    err = verify_sfv(sfv)["errors"][0]

    assert err["code"] == "E_CRC_MISMATCH"
    assert err["filename"] == "caf\\xe9.bin"
    assert err["path"].endswith("caf\\xe9.bin")
    err["path"].encode("utf-8")


def test_undecodable_malformed_line_is_escaped(tmp_path):
    sfv = tmp_path / "m.sfv"
    sfv.write_bytes(b"caf\xe9\n")
    assert verify_sfv(sfv)["errors"][0]["line"] == "caf\\xe9"
