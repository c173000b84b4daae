"""Tests for the case decoder."""

import pytest

from casecodec.codec.decoder import CaseDecoder, DecoderState, decode
from casecodec.codec.errors import CaseCodecError, CaseDecodeError


class TestDecode:
    def test_acronym_with_revert(self):
        assert decode(b"UnasaL said hello") == b"NASA said hello"

    def test_title_case(self):
        assert decode(b"Thello world") == b"Hello world"

    def test_run_ended_by_punctuation(self):
        assert decode(b"Unasa.") == b"NASA."

    def test_run_ended_by_space(self):
        assert decode(b"Uabc def") == b"ABC def"

    def test_run_to_end_of_stream(self):
        assert decode(b"Uabc") == b"ABC"
        assert decode(b"UabcL") == b"ABC"

    def test_title_affects_one_letter(self):
        assert decode(b"Tabc") == b"Abc"

    def test_camel_case(self):
        assert decode(b"TmcTdonald") == b"McDonald"

    def test_revert_mid_word(self):
        assert decode(b"UabLc") == b"ABc"

    def test_plain_passthrough(self):
        assert decode(b"just text, 42.") == b"just text, 42."

    def test_multibyte(self):
        assert decode("Uärger ist".encode("utf-8")) == "ÄRGER ist".encode("utf-8")

    def test_invalid_utf8_passthrough(self):
        assert decode(b"\xffTa") == b"\xffA"

    def test_empty(self):
        assert decode(b"") == b""


class TestDecodeErrors:
    def test_revert_outside_run(self):
        with pytest.raises(CaseDecodeError) as exc:
            decode(b"abcL")
        assert exc.value.position == 3

    def test_revert_after_title(self):
        with pytest.raises(CaseDecodeError):
            decode(b"TaL")

    def test_anchor_at_end(self):
        with pytest.raises(CaseDecodeError) as exc:
            decode(b"abT")
        assert exc.value.position == 3

    def test_anchor_before_space(self):
        with pytest.raises(CaseDecodeError) as exc:
            decode(b"U abc")
        assert exc.value.position == 1

    def test_anchor_before_anchor(self):
        with pytest.raises(CaseDecodeError):
            decode(b"UTa")

    def test_punct_marker_rejected(self):
        with pytest.raises(CaseDecodeError):
            decode(b"P.")

    def test_is_codec_error(self):
        with pytest.raises(CaseCodecError):
            decode(b"L")


class TestStep:
    def setup_method(self):
        self.dec = CaseDecoder()

    def test_markers_emit_nothing(self):
        assert self.dec.step("U") is None
        assert self.dec.state == DecoderState.RUN_PENDING

    def test_run_expansion(self):
        self.dec.step("U")
        assert self.dec.step("a") == "A"
        assert self.dec.state == DecoderState.IN_RUN
        assert self.dec.step("b") == "B"
        assert self.dec.step("L") is None
        assert self.dec.state == DecoderState.IDLE
        assert self.dec.step("c") == "c"

    def test_title_returns_to_idle(self):
        self.dec.step("T")
        assert self.dec.step("a") == "A"
        assert self.dec.state == DecoderState.IDLE
        assert self.dec.step("b") == "b"

    def test_boundary_ends_run(self):
        self.dec.step("U")
        self.dec.step("a")
        assert self.dec.step(" ") == " "
        assert self.dec.state == DecoderState.IDLE

    def test_position_counts_bytes(self):
        self.dec.step("é")
        assert self.dec.position == 2

    def test_finish_with_pending_anchor(self):
        self.dec.step("T")
        with pytest.raises(CaseDecodeError):
            self.dec.finish()
