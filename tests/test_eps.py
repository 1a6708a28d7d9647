import pytest

from eps2pdf.eps import (
    BOUNDING_BOX,
    ORIENTATION,
    apply_edits,
    detect_newline,
    find_directive,
    page_setup_block,
    parse_bounding_box,
    rewrite_header,
    transform_orientation,
)
from eps2pdf.errors import BoundingBoxParseError, DirectiveNotFound
from eps2pdf.models import BoundingBox, Edit, Orientation


def test_find_directive_stops_at_line_end():
    buffer = b"%!PS\n%%BoundingBox: 0 0 200 100\n%%EOF\n"
    span = find_directive(buffer, BOUNDING_BOX)
    assert span.text(buffer) == b" 0 0 200 100"
    assert buffer[span.end:span.end + 1] == b"\n"


def test_find_directive_is_case_insensitive_and_stops_at_percent():
    buffer = b"%%boundingbox: 1 2 3 4 % trailing comment\r\n"
    span = find_directive(buffer, BOUNDING_BOX)
    assert span.text(buffer) == b" 1 2 3 4 "


def test_find_directive_uses_first_occurrence():
    buffer = b"%%BoundingBox: 1 2 3 4\n%%BoundingBox: 5 6 7 8\n"
    span = find_directive(buffer, BOUNDING_BOX)
    assert span.text(buffer) == b" 1 2 3 4"


def test_find_directive_runs_to_end_of_buffer():
    buffer = b"%%Orientation: Portrait"
    span = find_directive(buffer, ORIENTATION)
    assert span.end == len(buffer)


def test_find_directive_missing():
    with pytest.raises(DirectiveNotFound):
        find_directive(b"%!PS\nshowpage\n", BOUNDING_BOX)


def test_parse_bounding_box_real_and_negative_values():
    bbox = parse_bounding_box(b" -10.5 -20 89.5 1e2 ")
    assert bbox == BoundingBox(-10.5, -20.0, 89.5, 100.0)
    assert bbox.width == 100.0
    assert bbox.height == 120.0


def test_bounding_box_width_height_are_absolute():
    bbox = parse_bounding_box(" 110 220 10 20")
    assert (bbox.width, bbox.height) == (100.0, 200.0)


@pytest.mark.parametrize("text", [b" (atend)", b" 1 2 3", b" 1 2 3 4 5", b" 1 2 x 4", b""])
def test_parse_bounding_box_rejects_malformed(text):
    with pytest.raises(BoundingBoxParseError):
        parse_bounding_box(text)


def test_detect_newline_variants():
    assert detect_newline(b"a\nb\r\n") == b"\n"
    assert detect_newline(b"a\r\nb\n") == b"\r\n"
    assert detect_newline(b"a\rb\n") == b"\r"
    assert detect_newline(b"no newline here") == b"\r\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        (" Landscape ", "Portrait"),
        ("PORTRAIT", "Landscape"),
        ("landscape", "Portrait"),
        ("Seascape", None),
        ("   ", None),
    ],
)
def test_transform_orientation_flip(text, expected):
    assert transform_orientation(text, Orientation.FLIP) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("Portrait", " "), (" landScape", " "), ("Other", None), ("", None)],
)
def test_transform_orientation_remove(text, expected):
    assert transform_orientation(text, Orientation.REMOVE) == expected


def test_transform_orientation_none_keeps_text():
    assert transform_orientation("Landscape", Orientation.NONE) is None


def test_page_setup_block_rounds_and_shifts_origin():
    block = page_setup_block(BoundingBox(10, 20, 110, 220), b"\n")
    assert block == (
        b" 0 0 100 200 \n"
        b"<< /PageSize [100 200] >> setpagedevice\n"
        b"gsave -10 -20 translate"
    )


def test_page_setup_block_rounds_fractional_values():
    block = page_setup_block(BoundingBox(0.4, -0.5, 100.6, 50.2), b"\n")
    assert block.startswith(b" 0 0 100 51 \n")
    assert block.endswith(b"gsave 0 1 translate")


def test_apply_edits_sorts_and_preserves_gaps():
    buffer = b"0123456789"
    edits = [Edit(6, 8, b"X"), Edit(1, 3, b"YY")]
    assert apply_edits(buffer, edits) == b"0YY345X89"


def test_apply_edits_rejects_overlap():
    with pytest.raises(ValueError):
        apply_edits(b"0123456789", [Edit(1, 5, b""), Edit(3, 6, b"")])


def test_rewrite_header_flip_example():
    buffer = b"%%BoundingBox: 0 0 200 100\n%%Orientation: Landscape\n"
    result = rewrite_header(buffer, Orientation.FLIP)
    assert result == (
        b"%%BoundingBox: 0 0 200 100 \n"
        b"<< /PageSize [200 100] >> setpagedevice\n"
        b"gsave 0 0 translate\n"
        b"%%Orientation:Portrait\n"
    )


def test_rewrite_header_orientation_before_bounding_box():
    buffer = b"%!PS\r\n%%Orientation: Portrait\r\n%%BoundingBox: 10 20 110 220\r\nshowpage\r\n"
    result = rewrite_header(buffer, Orientation.REMOVE)
    assert result == (
        b"%!PS\r\n%%Orientation: \r\n"
        b"%%BoundingBox: 0 0 100 200 \r\n"
        b"<< /PageSize [100 200] >> setpagedevice\r\n"
        b"gsave -10 -20 translate\r\nshowpage\r\n"
    )


def test_rewrite_header_none_leaves_orientation(sample_eps):
    result = rewrite_header(sample_eps, Orientation.NONE)
    assert b"%%Orientation: Landscape\n" in result
    assert b"gsave -10 -20 translate\n" in result


def test_rewrite_header_preserves_bytes_outside_spans(sample_eps):
    bb_span = find_directive(sample_eps, BOUNDING_BOX)
    or_span = find_directive(sample_eps, ORIENTATION)
    result = rewrite_header(sample_eps, Orientation.FLIP)

    assert result.startswith(sample_eps[:bb_span.start])
    tail = sample_eps[or_span.end:]
    assert result.endswith(tail)
    block = page_setup_block(parse_bounding_box(bb_span.text(sample_eps)), b"\n")
    middle = sample_eps[bb_span.end:or_span.start]
    assert result == sample_eps[:bb_span.start] + block + middle + b"Portrait" + tail


def test_rewrite_header_missing_orientation_is_noop():
    buffer = b"%%BoundingBox: 0 0 10 10\n"
    result = rewrite_header(buffer, Orientation.FLIP)
    assert result == rewrite_header(buffer, Orientation.NONE)


def test_rewrite_header_missing_bounding_box():
    with pytest.raises(DirectiveNotFound):
        rewrite_header(b"%%Orientation: Portrait\n", Orientation.FLIP)


@pytest.mark.parametrize('text', [b' 0 0 1e400 10', b' -1e308 0 1e308 1'])
def test_parse_bounding_box_rejects_non_finite_values(text):
    with pytest.raises(BoundingBoxParseError):
        parse_bounding_box(text)


@pytest.mark.parametrize('text', [b' 0\xa00 10 10', b' 0\x1c0 10 10', ' 0\xa00 10 10'])
def test_parse_bounding_box_splits_on_ascii_whitespace_only(text):
    with pytest.raises(BoundingBoxParseError):
        parse_bounding_box(text)


def test_rewrite_header_out_of_range_orientation_acts_as_none(sample_eps):
    assert rewrite_header(sample_eps, 5) == rewrite_header(sample_eps, Orientation.NONE)
    assert rewrite_header(sample_eps, 1) == rewrite_header(sample_eps, Orientation.FLIP)
