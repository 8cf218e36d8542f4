"""Tests for the plain-text formatter."""

from __future__ import annotations

import threading

import pytest

from nlg_formatter.domain.errors import MalformedNodeError, StructureTooDeepError
from nlg_formatter.domain.models import (
    DocumentCategory,
    DocumentElement,
    StringElement,
    create_document,
    create_list,
    create_list_item,
    create_paragraph,
    create_section,
    create_sentence,
    create_text,
)
from nlg_formatter.formatting import TextFormatter
from nlg_formatter.rules.constants import MAX_DEPTH_CEILING


E2E_TEXT = "Report\nIntro\nHello. World.\n\n * Buy milk * Walk dog"


@pytest.fixture
def formatter() -> TextFormatter:
    return TextFormatter()


def _report() -> DocumentElement:
    return create_document(
        "Report",
        [
            create_section(
                "Intro",
                [create_paragraph([create_sentence("Hello."), create_sentence("World.")])],
            ),
            create_list(
                components=[
                    create_list_item(create_sentence("Buy milk")),
                    create_list_item(create_sentence("Walk dog")),
                ]
            ),
        ],
    )


def _unknown(**kwargs) -> DocumentElement:
    return DocumentElement(category="figure", **kwargs)


# ---------------------------------------------------------------------------
# Absent input & text leaves
# ---------------------------------------------------------------------------


class TestAbsentAndLeaves:
    """None and text leaves pass through without layout."""

    def test_none_yields_empty_leaf(self, formatter):
        result = formatter.realise(None)
        assert isinstance(result, StringElement)
        assert result.realisation == ""

    def test_none_is_repeatable(self, formatter):
        assert [formatter.realise(None).realisation for _ in range(3)] == ["", "", ""]

    def test_text_leaf_passes_through(self, formatter):
        leaf = create_text("already realised  text\n")
        assert formatter.realise(leaf).realisation == "already realised  text\n"

    def test_empty_text_leaf(self, formatter):
        assert formatter.realise(StringElement()).realisation == ""

    def test_output_is_a_fixed_point(self, formatter):
        first = formatter.realise(_report())
        second = formatter.realise(first)
        assert second.realisation == first.realisation == E2E_TEXT


# ---------------------------------------------------------------------------
# Titled containers
# ---------------------------------------------------------------------------


class TestContainers:
    """Document, section and list: title line then children back to back."""

    def test_document_title_then_child(self, formatter):
        doc = create_document("T", [create_text("X")])
        assert formatter.realise(doc).realisation == "T\nX"

    def test_no_title_no_title_line(self, formatter):
        section = create_section(components=[create_text("X"), create_text("Y")])
        assert formatter.realise(section).realisation == "XY"

    def test_empty_title_still_emits_newline(self, formatter):
        section = create_section("", [create_text("X")])
        assert formatter.realise(section).realisation == "\nX"

    def test_title_only(self, formatter):
        assert formatter.realise(create_list("Shopping")).realisation == "Shopping\n"

    def test_empty_container(self, formatter):
        assert formatter.realise(create_document()).realisation == ""

    def test_children_order_preserved(self, formatter):
        c1, c2, c3 = create_text("one "), create_text("two "), create_text("three")
        forward = create_section("S", [c1, c2, c3])
        backward = create_section("S", [c3, c2, c1])
        assert formatter.realise(forward).realisation == "S\none two three"
        assert formatter.realise(backward).realisation == "S\nthreetwo one "

    def test_section_concatenates_child_realisations(self, formatter):
        children = [
            create_paragraph([create_sentence("A.")]),
            create_list(components=[create_list_item("x")]),
            create_text("tail"),
        ]
        section = create_section("S", children)
        expected = "S\n" + "".join(formatter.realise(c).realisation for c in children)
        assert formatter.realise(section).realisation == expected


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------


class TestParagraph:
    """Space-joined sentences and the unconditional blank-line terminator."""

    def test_sentences_joined_by_single_space(self, formatter):
        para = create_paragraph([create_sentence("Hello."), create_sentence("World.")])
        assert formatter.realise(para).realisation == "Hello. World.\n\n"

    def test_empty_middle_child_no_double_space(self, formatter):
        para = create_paragraph([create_text("A"), create_text(""), create_text("B")])
        assert formatter.realise(para).realisation == "A B\n\n"

    def test_unknown_middle_child_no_double_space(self, formatter):
        para = create_paragraph([create_text("A"), _unknown(title="x"), create_text("B")])
        assert formatter.realise(para).realisation == "A B\n\n"

    def test_empty_first_child_no_leading_space(self, formatter):
        para = create_paragraph([create_text(""), create_text("B")])
        assert formatter.realise(para).realisation == "B\n\n"

    def test_empty_last_child_no_trailing_space(self, formatter):
        para = create_paragraph([create_text("A"), create_text("")])
        assert formatter.realise(para).realisation == "A\n\n"

    def test_zero_children_still_terminated(self, formatter):
        assert formatter.realise(create_paragraph()).realisation == "\n\n"

    def test_title_is_ignored(self, formatter):
        para = DocumentElement(
            category=DocumentCategory.PARAGRAPH,
            title="ignored",
            components=[create_text("A")],
        )
        assert formatter.realise(para).realisation == "A\n\n"


# ---------------------------------------------------------------------------
# Sentences & list items
# ---------------------------------------------------------------------------


class TestSentenceAndListItem:
    """Own text verbatim, with a bullet for list items."""

    def test_sentence_verbatim(self, formatter):
        assert formatter.realise(create_sentence("The cat sat.")).realisation == "The cat sat."

    def test_sentence_without_realisation_uses_components(self, formatter):
        sentence = DocumentElement(
            category=DocumentCategory.SENTENCE,
            components=[create_text("The"), create_text("cat"), create_text("sat.")],
        )
        assert formatter.realise(sentence).realisation == "The cat sat."

    def test_list_item_prefix(self, formatter):
        item = DocumentElement(category=DocumentCategory.LIST_ITEM, realisation="go home")
        assert formatter.realise(item).realisation == " * go home"

    def test_list_item_from_sentence(self, formatter):
        item = create_list_item(create_sentence("Buy milk"))
        assert formatter.realise(item).realisation == " * Buy milk"

    def test_empty_list_item_keeps_bullet(self, formatter):
        item = DocumentElement(category=DocumentCategory.LIST_ITEM)
        assert formatter.realise(item).realisation == " * "

    def test_own_text_skips_empty_components(self, formatter):
        sentence = DocumentElement(
            category=DocumentCategory.SENTENCE,
            components=[create_text("a"), create_text(""), create_text("b")],
        )
        assert formatter.realise(sentence).realisation == "a b"

    def test_realisation_preferred_over_components(self, formatter):
        sentence = DocumentElement(
            category=DocumentCategory.SENTENCE,
            realisation="Upstream.",
            components=[create_text("ignored")],
        )
        assert formatter.realise(sentence).realisation == "Upstream."

    def test_deeply_nested_own_text_is_linear(self, formatter):
        inner = create_section(components=[create_text("x")])
        for _ in range(60):
            inner = create_section(components=[inner])
        assert formatter.realise(create_list_item(inner)).realisation == " * x"

    def test_list_items_have_no_separator(self, formatter):
        lst = create_list(components=[create_list_item("a"), create_list_item("b")])
        assert formatter.realise(lst).realisation == " * a * b"


# ---------------------------------------------------------------------------
# Unrecognised categories
# ---------------------------------------------------------------------------


class TestUnrecognised:
    """Categories outside the six layout roles render as nothing."""

    def test_dropped(self, formatter):
        assert formatter.realise(_unknown()).realisation == ""

    def test_dropped_regardless_of_title_and_children(self, formatter):
        node = _unknown(
            title="Caption",
            realisation="text",
            components=[create_sentence("Hidden.")],
        )
        assert formatter.realise(node).realisation == ""

    def test_dropped_inside_document(self, formatter):
        doc = create_document("T", [_unknown(title="x"), create_text("Y")])
        assert formatter.realise(doc).realisation == "T\nY"


# ---------------------------------------------------------------------------
# Batch realisation
# ---------------------------------------------------------------------------


class TestRealiseAll:
    """Batch realisation is element-wise."""

    def test_none_yields_empty_list(self, formatter):
        assert formatter.realise_all(None) == []

    def test_empty_list(self, formatter):
        assert formatter.realise_all([]) == []

    def test_element_wise_not_merged(self, formatter):
        results = formatter.realise_all(
            [create_sentence("A."), None, create_paragraph([create_sentence("B.")])]
        )
        assert [r.realisation for r in results] == ["A.", "", "B.\n\n"]

    def test_initialise_is_harmless(self, formatter):
        formatter.initialise()
        assert formatter.realise(create_sentence("A.")).realisation == "A."


# ---------------------------------------------------------------------------
# Contract violations
# ---------------------------------------------------------------------------


class TestContractViolations:
    """Objects that are not nodes fail fast."""

    def test_plain_string_is_malformed(self, formatter):
        with pytest.raises(MalformedNodeError, match="str"):
            formatter.realise("not a node")

    def test_malformed_child_is_reported(self, formatter):
        section = create_section("S")
        section.components.append(42)
        with pytest.raises(MalformedNodeError, match="int"):
            formatter.realise(section)

    def test_malformed_in_batch(self, formatter):
        with pytest.raises(MalformedNodeError):
            formatter.realise_all([create_text("ok"), object()])


class TestDepthGuard:
    """Cyclic or over-deep trees raise StructureTooDeepError."""

    @staticmethod
    def _chain(levels: int) -> DocumentElement:
        node = create_section()
        for _ in range(levels - 1):
            node = create_section(components=[node])
        return node

    def test_within_limit(self):
        assert TextFormatter(max_depth=3).realise(self._chain(4)).realisation == ""

    def test_beyond_limit(self):
        with pytest.raises(StructureTooDeepError, match="3"):
            TextFormatter(max_depth=3).realise(self._chain(5))

    def test_cycle_is_reported(self, formatter):
        section = create_section("Loop")
        section.components.append(section)
        with pytest.raises(StructureTooDeepError):
            formatter.realise(section)

    def test_cyclic_list_item_is_reported(self, formatter):
        item = DocumentElement(category=DocumentCategory.LIST_ITEM)
        item.add_component(item)
        with pytest.raises(StructureTooDeepError):
            formatter.realise(item)

    def test_too_deep_list_item_is_reported(self):
        item = create_list_item(self._chain(10))
        with pytest.raises(StructureTooDeepError):
            TextFormatter(max_depth=3).realise(item)

    def test_too_deep_sentence_is_reported(self):
        sentence = DocumentElement(
            category=DocumentCategory.SENTENCE, components=[self._chain(10)]
        )
        with pytest.raises(StructureTooDeepError):
            TextFormatter(max_depth=3).realise(sentence)

    def test_list_item_text_within_limit(self):
        item = create_list_item(create_section(components=[create_text("x")]))
        assert TextFormatter(max_depth=2).realise(item).realisation == " * x"

    def test_full_configured_depth_realises(self):
        assert TextFormatter(max_depth=MAX_DEPTH_CEILING).realise(
            self._chain(MAX_DEPTH_CEILING + 1)
        ).realisation == ""

    def test_formatter_usable_after_failure(self):
        fmt = TextFormatter(max_depth=3)
        with pytest.raises(StructureTooDeepError):
            fmt.realise(self._chain(5))
        assert fmt.realise(create_sentence("Still fine.")).realisation == "Still fine."


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestEndToEnd:
    """A full report tree, its immutability and concurrent use."""

    def test_report(self, formatter):
        assert formatter.realise(_report()).realisation == E2E_TEXT

    def test_input_not_mutated(self, formatter):
        doc = _report()
        before = doc.model_dump()
        formatter.realise(doc)
        assert doc.model_dump() == before

    def test_concurrent_calls(self, formatter):
        results: list[str] = []
        lock = threading.Lock()

        def work():
            text = formatter.realise(_report()).realisation
            with lock:
                results.append(text)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == [E2E_TEXT] * 8
