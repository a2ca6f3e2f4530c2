# -*- coding: utf-8 -*-
"""
Tests for the in-memory language preference store
"""
from triggers.fanout_translation import InMemoryPreferenceStore


class TestConversationPreferences:
    def test_unknown_conversation_is_empty(self, store):
        assert store.get_conversation_preferences("missing") == {}

    def test_set_creates_entry(self, store):
        store.set_conversation_preference("g1", "u1", "english")

        assert store.get_conversation_preferences("g1") == {"u1": "english"}

    def test_latest_tag_wins(self, store):
        store.set_conversation_preference("g1", "u1", "english")
        store.set_conversation_preference("g1", "u1", "thai")

        assert store.get_conversation_preferences("g1") == {"u1": "thai"}

    def test_set_is_idempotent(self, store):
        store.set_conversation_preference("g1", "u1", "ja")
        store.set_conversation_preference("g1", "u1", "ja")

        assert store.get_conversation_preferences("g1") == {"u1": "ja"}

    def test_tags_are_lower_cased(self, store):
        store.set_conversation_preference("g1", "u1", "French")

        assert store.get_conversation_preferences("g1")["u1"] == "french"

    def test_conversations_are_isolated(self, store):
        store.set_conversation_preference("g1", "u1", "english")
        store.set_conversation_preference("g2", "u1", "thai")

        assert store.get_conversation_preferences("g1") == {"u1": "english"}
        assert store.get_conversation_preferences("g2") == {"u1": "thai"}

    def test_returned_mapping_is_a_copy(self, store):
        store.set_conversation_preference("g1", "u1", "english")

        store.get_conversation_preferences("g1")["u2"] = "thai"

        assert store.get_conversation_preferences("g1") == {"u1": "english"}

    def test_ensure_initialized_keeps_existing_preferences(self, store):
        store.set_conversation_preference("g1", "u1", "english")

        store.ensure_conversation_initialized("g1")
        store.ensure_conversation_initialized("g2")

        assert store.get_conversation_preferences("g1") == {"u1": "english"}
        assert store.get_conversation_preferences("g2") == {}


class TestDirectPreferences:
    def test_set_and_get(self):
        store = InMemoryPreferenceStore()

        store.set_direct_preference("u5", "JA")

        assert store.get_direct_preference("u5") == "ja"

    def test_follow_initializes_without_preference(self):
        store = InMemoryPreferenceStore()

        store.ensure_direct_initialized("u5")

        assert store.get_direct_preference("u5") is None

    def test_follow_does_not_reset_existing_preference(self):
        store = InMemoryPreferenceStore()
        store.set_direct_preference("u5", "ja")

        store.ensure_direct_initialized("u5")

        assert store.get_direct_preference("u5") == "ja"

    def test_direct_and_conversation_scopes_are_separate(self):
        store = InMemoryPreferenceStore()

        store.set_direct_preference("u1", "ja")

        assert store.get_conversation_preferences("u1") == {}
