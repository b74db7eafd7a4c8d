"""
Unit tests for the home and Better Call Saul screens
"""

import json
from unittest.mock import patch

import pytest

from quotegen.errors import NO_MATCHES, NO_NAME_MATCH, NOTHING_TO_SHARE, ONLY_ONE_MATCH, NothingToShare
from quotegen.models import CreatorFilter, LengthFilter, RemoteQuote
from quotegen.screens import HomeScreen, NO_QUOTE_PLACEHOLDER, SAUL_PLACEHOLDER, SaulScreen

from .conftest import make_response


class TestHomeScreen:
    """Test cases for HomeScreen"""

    @pytest.fixture
    def home(self, store, rng):
        return HomeScreen(store, rng=rng)

    def test_initial_state(self, home):
        assert home.quote is None
        assert home.error_message is None
        assert home.name_message is None
        assert len(home.matches) == 5
        assert home.display_text() == NO_QUOTE_PLACEHOLDER

    def test_short_filter_then_generate_fails(self, home):
        home.length = LengthFilter.SHORT
        assert home.matches == ()
        assert home.generate() is None
        assert home.error_message == NO_MATCHES
        assert home.quote is None

    def test_failed_generate_keeps_previous_quote(self, home):
        shown = home.generate()
        home.length = LengthFilter.SHORT
        home.generate()
        assert home.quote == shown
        assert home.error_message == NO_MATCHES

    def test_mandela_singleton(self, home):
        home.creator_name = "MANDELA"
        quote = home.generate()
        assert quote.creator_name == "Nelson Mandela"
        assert home.error_message == ONLY_ONE_MATCH
        assert home.name_message is None

    def test_name_message_follows_query(self, home):
        home.creator_name = "nobody"
        assert home.name_message == NO_NAME_MATCH
        home.generate()
        assert home.error_message == NO_MATCHES
        home.creator_name = ""
        assert home.name_message is None

    def test_name_message_clears_when_matching_quote_added(self, home):
        home.creator_name = "ada"
        assert home.name_message == NO_NAME_MATCH
        home.add_quote("Test", CreatorFilter.ENGINEER, "Ada")
        assert home.name_message is None
        assert [q.text for q in home.matches] == ["Test"]

    def test_generate_clears_previous_notice(self, home):
        home.creator_name = "lennon"
        home.generate()
        assert home.error_message == ONLY_ONE_MATCH
        home.creator_name = ""
        home.generate()
        assert home.error_message is None

    def test_add_quote_recomputes(self, home):
        home.creator = CreatorFilter.ENGINEER
        home.add_quote("Test", CreatorFilter.ENGINEER, "Ada")
        assert [q.creator_name for q in home.matches] == ["Walt Disney", "Steve Jobs", "Ada"]

    def test_setters_accept_values(self, home):
        home.length = "large"
        home.creator = "artist"
        assert home.length is LengthFilter.LARGE
        assert home.creator is CreatorFilter.ARTIST
        assert len(home.matches) == 2

    def test_share_without_quote(self, home):
        with pytest.raises(NothingToShare):
            home.share()
        assert home.error_message == NOTHING_TO_SHARE

    def test_share_formats_quote(self, home):
        home.creator_name = "jobs"
        home.generate()
        assert home.share() == "\"Your time is limited, don't waste it living someone else's life.\" - Steve Jobs"


class TestSaulScreen:
    """Test cases for SaulScreen"""

    @pytest.fixture
    def screen(self, saul_client, dispatcher):
        return SaulScreen(saul_client, dispatcher)

    def _fetch(self, screen, body, status=200):
        with patch("quotegen.saul_client.requests.get", return_value=make_response(body, status)):
            future = screen.fetch()
            screen.dispatcher.wait_and_drain(future, timeout=5)

    def test_placeholder(self, screen):
        assert screen.display_lines() == (SAUL_PLACEHOLDER,)

    def test_successful_fetch(self, screen):
        self._fetch(screen, json.dumps([{"quote": "It's all good, man.", "author": "Saul Goodman"}]).encode())
        assert screen.quote == RemoteQuote(quote="It's all good, man.", author="Saul Goodman")
        assert screen.error_message is None
        assert screen.display_lines() == ('"It\'s all good, man."', "- Saul Goodman")

    @pytest.mark.parametrize("body", [b"[]", b"{broken"])
    def test_failures_keep_prior_quote(self, screen, body):
        self._fetch(screen, json.dumps([{"quote": "First", "author": "Kim Wexler"}]).encode())
        self._fetch(screen, body)
        assert screen.quote == RemoteQuote(quote="First", author="Kim Wexler")
        assert screen.error_message

    def test_result_after_close_is_ignored(self, screen):
        with patch("quotegen.saul_client.requests.get", return_value=make_response(b'[{"quote": "q", "author": "a"}]')):
            future = screen.fetch()
            future.result(timeout=5)
        screen.close()
        assert screen.dispatcher.drain() == 1
        assert screen.quote is None
        assert screen.closed
