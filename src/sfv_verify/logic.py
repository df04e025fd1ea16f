from pathlib import Path
from sfv_core import InvalidChecksumError, MalformedEntryError, parse
from sfv_core.display import display_text, format_crc32
from .const import ERRORS

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def _error(code: str, **fields) -> dict:
    # Manifest-derived strings may hold undecodable bytes; emit them escaped.
    clean = {k: display_text(v) if isinstance(v, (str, Path)) else v for k, v in fields.items()}
    return {"code": code, "message": ERRORS[code], **clean}

def _result(errors: list) -> dict:
    return {"status": "FAIL" if errors else "PASS", "error_count": len(errors), "errors": errors}

def _check_entry(entry):
    try:
        computed = entry.compute()
    except OSError as e:
        return _error("E_FILE_IO", filename=entry.filename, path=entry.path, detail=str(e))
    if computed != entry.crc32:
        return _error(
            "E_CRC_MISMATCH",
            filename=entry.filename,
            expected=entry.crc32_hex,
            computed=format_crc32(computed),
        )
    return None

def verify_sfv(sfv_path: Path, preflight: bool = False, all_entries: bool = False) -> dict:
    """Verify an SFV file and return a status report.

    By default the report stops at the first failing entry. With
    ``all_entries`` every entry is hashed and every failure is listed.
    """
    sfv_path = Path(sfv_path)

    try:
        manifest = parse(sfv_path)
    except OSError as e:
        return _result([_error("E_MANIFEST_IO", path=sfv_path, detail=str(e))])
    except MalformedEntryError as e:
        return _result([_error("E_MALFORMED_ENTRY", line=e.line, lineno=e.lineno)])
    except InvalidChecksumError as e:
        return _result([_error("E_INVALID_CHECKSUM", token=e.token, detail=e.reason)])

    if not manifest.entries:
        return _result([_error("E_EMPTY_MANIFEST", path=sfv_path)])

    errors = []

    # Pre-flight: every listed file must be present before any hashing starts.
    if preflight:
        for entry in manifest:
            if not entry.exists():
                errors.append(_error("E_FILE_MISSING", filename=entry.filename, path=entry.path))
                if not all_entries:
                    break
        if errors:
            return _result(errors)

    # Same order and early exit as Manifest.verify, but keeps the computed value for the report.
    for entry in manifest:
        err = _check_entry(entry)
        if err is not None:
            errors.append(err)
            if not all_entries:
                break

    return _result(errors)
