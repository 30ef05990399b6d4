"""Property-based tests for error construction and chain rendering."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ees import (
    MainError,
    make_error,
    make_wrapped_error,
    render_chain,
    to_opaque,
)

# Messages without newlines keep the expected layouts easy to state.
messages = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\n\r"),
    max_size=40,
)
chains = st.lists(messages, min_size=1, max_size=15)


def build_chain(chain_messages: list[str]) -> BaseException:
    """Build an error whose chain messages are ``chain_messages``, outermost first."""
    *outer, innermost = chain_messages
    error: BaseException = make_error(innermost)
    for message in reversed(outer):
        error = make_wrapped_error(error, message)
    return error


@pytest.mark.property
class TestMessageConstruction:
    """Property tests for make_error."""

    @given(messages)
    @settings(max_examples=200)
    def test_literal_template_is_verbatim(self, template):
        """A template with no arguments renders exactly as given."""
        assert str(render_chain(make_error(template))) == template

    @given(st.lists(st.one_of(st.integers(), st.text(max_size=10)), min_size=1, max_size=5))
    @settings(max_examples=100)
    def test_matches_str_format(self, args):
        """Templates with substitutions match str.format."""
        template = " / ".join("{}" for _ in args)
        assert str(make_error(template, *args)) == template.format(*args)


@pytest.mark.property
class TestChainRendering:
    """Property tests for compact and expanded layouts."""

    @given(chains)
    @settings(max_examples=200)
    def test_compact_is_colon_joined(self, chain_messages):
        """Compact rendering joins every message with ': '."""
        error = build_chain(chain_messages)
        assert str(render_chain(error)) == ": ".join(chain_messages)

    @given(chains)
    @settings(max_examples=200)
    def test_expanded_layout(self, chain_messages):
        """Expanded rendering follows the depth-dependent layout."""
        expanded = f"{render_chain(build_chain(chain_messages)):#}"
        outer, causes = chain_messages[0], chain_messages[1:]

        if not causes:
            assert expanded == outer
        elif len(causes) == 1:
            assert expanded == f"{outer}\n\nCaused by:\n    {causes[0]}"
        else:
            lines = expanded.split("\n")
            assert lines[:3] == [outer, "", "Caused by:"]
            assert len(lines) == 3 + len(causes)
            for index, (line, message) in enumerate(zip(lines[3:], causes, strict=True)):
                assert line == f"{index:>5}: {message}"

    @given(chains)
    @settings(max_examples=100)
    def test_opaque_wrap_is_idempotent(self, chain_messages):
        """Opaque wrapping never changes either rendering."""
        error = build_chain(chain_messages)
        chain = render_chain(error)
        for wrapped in (to_opaque(error), to_opaque(to_opaque(error))):
            assert str(render_chain(wrapped)) == str(chain)
            assert f"{render_chain(wrapped):#}" == f"{chain:#}"

    @given(chains)
    @settings(max_examples=100)
    def test_main_error_is_expanded_render(self, chain_messages):
        """MainError's str and repr are the expanded rendering."""
        error = build_chain(chain_messages)
        main_error = MainError(error)
        assert str(main_error) == repr(main_error) == f"{render_chain(error):#}"
