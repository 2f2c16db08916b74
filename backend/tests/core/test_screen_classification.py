"""Screen Classification tests — entry detection, dead-end exemptions, categories."""

import pytest

from trinity.core.domain_types import InterfaceKind, ScreenCategory
from trinity.core.screen_classification import (
    classify_interface_kind,
    classify_screen_type,
    find_entry_interface,
    is_exempt_dead_end,
)
from trinity.core.spec_records import InterfaceNode


def _nodes(*names: str) -> list[InterfaceNode]:
    return [InterfaceNode(name=n) for n in names]


def test_entry_keyword_priority_beats_position():
    entry = find_entry_interface(_nodes("MainMenu", "home", "Login", "AdminDashboard"))
    assert entry.name == "AdminDashboard"


def test_entry_first_matching_interface_wins_within_keyword():
    entry = find_entry_interface(_nodes("settings", "home_a", "home_b"))
    assert entry.name == "home_a"


def test_entry_falls_back_to_first_interface():
    assert find_entry_interface(_nodes("alpha", "beta")).name == "alpha"


def test_entry_is_none_for_empty_list():
    assert find_entry_interface([]) is None


@pytest.mark.parametrize("name,exempt", [
    ("OrderConfirmation", True),
    ("signup_success", True),
    ("ErrorPage", True),
    ("logout", True),
    ("settings", False),
    ("report_view", False),
])
def test_dead_end_exemptions(name, exempt):
    assert is_exempt_dead_end(name) is exempt


def test_interface_kind_follows_entry_keywords():
    assert classify_interface_kind("user_dashboard") == InterfaceKind.MAIN
    assert classify_interface_kind("reports") == InterfaceKind.NORMAL
    assert InterfaceNode(name="Home").kind == InterfaceKind.MAIN


@pytest.mark.parametrize("name,category", [
    ("login", ScreenCategory.AUTH),
    ("SignupForm", ScreenCategory.AUTH),
    ("dashboard", ScreenCategory.MAIN),
    ("admin_panel", ScreenCategory.ADMIN),
    ("settings", ScreenCategory.ADMIN),
    ("welcome_tour", ScreenCategory.ONBOARDING),
    ("project_detail", ScreenCategory.FEATURE),
])
def test_screen_categories(name, category):
    assert classify_screen_type(name) == category


def test_category_order_auth_before_main():
    # "login_home" matches both tables; auth is declared first
    assert classify_screen_type("login_home") == ScreenCategory.AUTH
