"""Tests for the Streamlit app module."""

from datetime import datetime, timezone
from types import SimpleNamespace

from src.adapters.interface.streamlit import app
from src.domain.models import Home, HomeSnapshot, Member, ProrationResult
from src.domain.services.validation import ValidationError
from src.infrastructure.in_memory_home_store import InMemoryHomeStore


_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
_HOME = Home(id="h", name="Flat", share_code="ABC123", created_at=_NOW)


class _FakeSidebar:
    def __init__(self, page: str, leave: bool = False) -> None:
        self.page = page
        self.leave = leave
        self.headers: list[str] = []
        self.captions: list[str] = []

    def header(self, text: str):
        self.headers.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def button(self, label: str):
        return self.leave

    def selectbox(self, label: str, options):
        assert self.page in options
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Dashboard", leave: bool = False) -> None:
        self.config_called = False
        self.title_called = False
        self.errors: list[str] = []
        self.rerun_called = False
        self.sidebar = _FakeSidebar(page, leave)

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_called = True
        self.title_text = text

    def error(self, text: str):
        self.errors.append(text)

    def rerun(self):
        self.rerun_called = True


def _patch_app(monkeypatch, fake_st, store) -> None:
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_store", lambda: store)
    monkeypatch.setattr(
        app,
        "_get_settings",
        lambda: SimpleNamespace(currency_symbol="$"),
    )


def test_main_shows_setup_without_active_home(monkeypatch):
    """main should render the create/join screen when no home exists."""
    fake_st = _FakeStreamlit()
    store = InMemoryHomeStore()
    rendered = []
    _patch_app(monkeypatch, fake_st, store)
    monkeypatch.setattr(app, "_render_home_setup", rendered.append)

    app.main()

    assert fake_st.config_called
    assert fake_st.title_called
    assert rendered == [store]
    assert fake_st.sidebar.headers == []


def test_main_routes_to_selected_page(monkeypatch):
    fake_st = _FakeStreamlit(page="Members")
    store = InMemoryHomeStore(HomeSnapshot(home=_HOME))
    calls = []
    _patch_app(monkeypatch, fake_st, store)
    monkeypatch.setattr(
        app,
        "_render_members",
        lambda *args: calls.append(("members", args)),
    )
    monkeypatch.setattr(
        app,
        "_render_dashboard",
        lambda *args: calls.append(("dashboard", args)),
    )

    app.main()

    assert fake_st.sidebar.headers == ["Flat"]
    assert "ABC123" in fake_st.sidebar.captions[0]
    assert calls == [("members", (store, store.get_snapshot(), "$"))]


def test_main_leave_home_resets_store(monkeypatch):
    fake_st = _FakeStreamlit(leave=True)
    store = InMemoryHomeStore(HomeSnapshot(home=_HOME))
    _patch_app(monkeypatch, fake_st, store)
    monkeypatch.setattr(app, "_render_dashboard", lambda *args: None)

    app.main()

    assert store.get_snapshot() is None
    assert fake_st.rerun_called


def test_run_action_reports_validation_errors(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    def _fail(value):
        raise ValidationError(f"bad {value}")

    assert app._run_action(_fail, "amount") is False
    assert fake_st.errors == ["bad amount"]
    assert app._run_action(lambda: None) is True


def test_prepare_contribution_chart_data():
    results = [
        ProrationResult("a", "Ana", 0.75, 300.0),
        ProrationResult("b", "Bob", 0.25, 200.0),
    ]

    data = app._prepare_contribution_chart_data(results, "$")

    assert [row["member"] for row in data] == ["Ana", "Bob"]
    assert data[0]["amount"] == 300.0
    assert data[0]["amount_label"] == "$300"
    assert data[1]["share_label"] == "25.0%"
    assert data[0]["color"] == app.MEMBER_COLORS[0]


def test_prepare_income_chart_data_skips_zero_income():
    members = [
        Member("a", "h", "Ana", 3000.0, _NOW),
        Member("b", "h", "Bob", 0.0, _NOW),
    ]

    data = app._prepare_income_chart_data(members, "€")

    assert [row["member"] for row in data] == ["Ana"]
    assert data[0]["income_label"] == "€3,000"


def test_member_colors_cycle():
    count = len(app.MEMBER_COLORS)

    assert app._member_color(count) == app.MEMBER_COLORS[0]
