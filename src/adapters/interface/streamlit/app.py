"""Streamlit household dashboard entry point."""

from collections.abc import Sequence

import altair as alt
import streamlit as st

from src.adapters.interface.formatting import (
    format_count,
    format_currency,
    format_percentage,
)
from src.application.errors import NoActiveHomeError
from src.application.ports.home_store import HomeStorePort
from src.application.use_cases.get_proration import GetProrationUseCase
from src.application.use_cases.manage_expenses import (
    AddExpenseUseCase,
    RemoveExpenseUseCase,
)
from src.application.use_cases.manage_home import (
    CreateHomeUseCase,
    JoinHomeUseCase,
    ResetHomeUseCase,
)
from src.application.use_cases.manage_members import (
    AddMemberUseCase,
    RemoveMemberUseCase,
)
from src.domain.models import (
    ExpenseScope,
    ExpenseType,
    HomeSnapshot,
    Member,
    ProrationResult,
    ProrationView,
)
from src.domain.services.validation import ValidationError
from src.infrastructure.container import build_home_store
from src.infrastructure.settings import HouseholdSettings


MEMBER_COLORS = ["#1a7a50", "#b5651d", "#3b6fa8", "#7c3694", "#b34b1a"]
PAGES = ["Dashboard", "Members", "Expenses"]
SCOPE_LABELS = {
    ExpenseScope.SHARED: "Shared",
    ExpenseScope.INDIVIDUAL: "Individual",
}
TYPE_LABELS = {ExpenseType.FIXED: "Fixed", ExpenseType.VARIABLE: "Variable"}


@st.cache_resource(show_spinner=False)
def _get_store() -> HomeStorePort:
    """Return the home store shared by every session of this process."""
    return build_home_store()


@st.cache_resource(show_spinner=False)
def _get_settings() -> HouseholdSettings:
    """Return settings read once per process."""
    return HouseholdSettings.from_env()


def _fetch_proration(store: HomeStorePort) -> ProrationView:
    """Compute the proration for the active home."""
    return GetProrationUseCase(store=store).execute()


def _member_color(index: int) -> str:
    return MEMBER_COLORS[index % len(MEMBER_COLORS)]


def _prepare_contribution_chart_data(
    results: Sequence[ProrationResult],
    symbol: str,
) -> list[dict[str, str | float]]:
    """Prepare Altair rows for the contribution bar chart.

    Args:
        results: Proration results in member order.
        symbol: Currency symbol for labels.

    Returns:
        Chart rows with raw amounts and display labels.
    """
    return [
        {
            "member": result.member_name,
            "amount": result.assigned_amount,
            "amount_label": format_currency(result.assigned_amount, symbol),
            "share_label": format_percentage(result.proportional_percentage),
            "color": _member_color(index),
        }
        for index, result in enumerate(results)
    ]


def _prepare_income_chart_data(
    members: Sequence[Member],
    symbol: str,
) -> list[dict[str, str | float]]:
    """Prepare Altair rows for the income distribution donut."""
    return [
        {
            "member": member.name,
            "income": member.monthly_income,
            "income_label": format_currency(member.monthly_income, symbol),
            "color": _member_color(index),
        }
        for index, member in enumerate(members)
        if member.monthly_income > 0
    ]


def _run_action(action, *args, **kwargs) -> bool:
    """Run a mutating use case and report user errors in the page.

    Returns:
        bool: True when the action succeeded.
    """
    try:
        action(*args, **kwargs)
    except (ValidationError, NoActiveHomeError) as exc:
        st.error(str(exc))
        return False
    return True


def _render_home_setup(store: HomeStorePort) -> None:
    """Render the create / join screen shown without an active home."""
    st.subheader("How do you want to start?")
    create_col, join_col = st.columns(2)
    with create_col:
        with st.form("create_home"):
            name = st.text_input("Home name", placeholder="e.g. Garcia family")
            submitted = st.form_submit_button("Create home")
        if submitted and _run_action(
            CreateHomeUseCase(store=store).execute,
            name,
        ):
            st.rerun()
    with join_col:
        with st.form("join_home"):
            code = st.text_input("Share code", placeholder="e.g. A1B2C3")
            submitted = st.form_submit_button("Join")
        if submitted and _run_action(
            JoinHomeUseCase(store=store).execute,
            code,
        ):
            st.rerun()


def _render_contribution_chart(
    results: Sequence[ProrationResult],
    symbol: str,
) -> None:
    data = _prepare_contribution_chart_data(results, symbol)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("member:N", title=None, sort=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color("color:N", scale=None, legend=None),
        tooltip=[
            alt.Tooltip("member:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(height=240)
    st.subheader("Contribution by member")
    st.altair_chart(chart, width="stretch")


def _render_income_chart(members: Sequence[Member], symbol: str) -> None:
    data = _prepare_income_chart_data(members, symbol)
    st.subheader("Income distribution")
    if not data:
        st.info("No income declared yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=60,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("income:Q"),
        color=alt.Color(
            "member:N",
            scale=alt.Scale(range=[row["color"] for row in data]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[alt.Tooltip("member:N"), alt.Tooltip("income_label:N")],
    ).properties(height=240)
    st.altair_chart(chart, width="stretch")


def _render_unassigned_warning(view: ProrationView, symbol: str) -> None:
    for expense in view.orphaned_expenses:
        st.warning(
            f"Unassigned expense: '{expense.description}' "
            f"({format_currency(expense.amount, symbol)}) is not charged "
            "to anyone."
        )


def _render_dashboard(
    store: HomeStorePort,
    snapshot: HomeSnapshot,
    symbol: str,
) -> None:
    """Render KPIs, charts, and the proration table."""
    view = _fetch_proration(store)
    summary = view.summary

    income_col, expenses_col, shared_col, balance_col = st.columns(4)
    income_col.metric(
        "Total income",
        format_currency(summary.total_income, symbol),
        format_count(summary.member_count, "member"),
        delta_color="off",
    )
    expenses_col.metric(
        "Total expenses",
        format_currency(summary.total_expenses, symbol),
        format_count(summary.expense_count, "expense"),
        delta_color="off",
    )
    shared_col.metric(
        "Shared expenses",
        format_currency(summary.shared_expenses, symbol),
        (
            f"{format_percentage(summary.shared_ratio, digits=0)} of total"
            if summary.shared_ratio is not None
            else None
        ),
        delta_color="off",
    )
    balance_col.metric(
        "Balance",
        format_currency(summary.balance, symbol),
        "income - expenses",
        delta_color="off",
    )

    _render_unassigned_warning(view, symbol)

    if not view.results:
        st.info("Add members and expenses to see the contribution split.")
        return

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_contribution_chart(view.results, symbol)
    with chart_right:
        _render_income_chart(snapshot.members, symbol)

    st.subheader("Contribution summary")
    rows = [
        {
            "Member": result.member_name,
            "Share": format_percentage(result.proportional_percentage),
            "Contribution": format_currency(result.assigned_amount, symbol),
        }
        for result in view.results
    ]
    st.dataframe(rows, width="stretch", hide_index=True)


def _render_members(
    store: HomeStorePort,
    snapshot: HomeSnapshot,
    symbol: str,
) -> None:
    """Render the member form and list."""
    st.subheader("Members")
    with st.form("add_member", clear_on_submit=True):
        name = st.text_input("Name", placeholder="e.g. Ana")
        income = st.number_input(
            "Monthly income",
            min_value=0.0,
            step=100.0,
        )
        submitted = st.form_submit_button("Add member")
    if submitted and _run_action(
        AddMemberUseCase(store=store).execute,
        name,
        income,
    ):
        st.rerun()

    if not snapshot.members:
        st.caption("No members yet.")
        return

    results = {
        result.member_id: result
        for result in _fetch_proration(store).results
    }
    for member in snapshot.members:
        name_col, share_col, remove_col = st.columns([3, 2, 1])
        name_col.write(
            f"**{member.name}** · "
            f"{format_currency(member.monthly_income, symbol)}"
        )
        result = results.get(member.id)
        if result is not None:
            share_col.write(format_percentage(result.proportional_percentage))
        if remove_col.button("Remove", key=f"remove_member_{member.id}"):
            RemoveMemberUseCase(store=store).execute(member.id)
            st.rerun()


def _render_expenses(
    store: HomeStorePort,
    snapshot: HomeSnapshot,
    symbol: str,
) -> None:
    """Render the expense form and list."""
    st.subheader("Expenses")
    members_by_id = {member.id: member for member in snapshot.members}
    with st.form("add_expense", clear_on_submit=True):
        description = st.text_input("Description", placeholder="e.g. Rent")
        amount = st.number_input("Amount", min_value=0.0, step=10.0)
        type_col, scope_col = st.columns(2)
        expense_type = type_col.selectbox(
            "Type",
            options=list(ExpenseType),
            format_func=TYPE_LABELS.get,
        )
        scope = scope_col.selectbox(
            "Scope",
            options=list(ExpenseScope),
            format_func=SCOPE_LABELS.get,
        )
        assignee = st.selectbox(
            "Assign to (individual expenses)",
            options=[None, *members_by_id],
            format_func=lambda member_id: (
                "Select a member..."
                if member_id is None
                else members_by_id[member_id].name
            ),
        )
        submitted = st.form_submit_button("Add expense")
    if submitted and _run_action(
        AddExpenseUseCase(store=store).execute,
        description,
        amount,
        expense_type,
        scope,
        assignee,
    ):
        st.rerun()

    if not snapshot.expenses:
        st.caption("No expenses recorded yet.")
        return

    total = sum((expense.amount for expense in snapshot.expenses), 0.0)
    st.caption(f"Total expenses: {format_currency(total, symbol)}")
    for expense in snapshot.expenses:
        label_col, amount_col, remove_col = st.columns([3, 2, 1])
        scope_label = SCOPE_LABELS[expense.scope]
        assigned = members_by_id.get(expense.member_id_assigned)
        if expense.scope == ExpenseScope.INDIVIDUAL and assigned is not None:
            scope_label = f"{scope_label} · {assigned.name}"
        label_col.write(
            f"**{expense.description}** · {TYPE_LABELS[expense.expense_type]}"
            f" · {scope_label}"
        )
        amount_col.write(format_currency(expense.amount, symbol))
        if remove_col.button("Remove", key=f"remove_expense_{expense.id}"):
            RemoveExpenseUseCase(store=store).execute(expense.id)
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Household Proration", layout="wide")
    st.title("Household Proration")

    store = _get_store()
    symbol = _get_settings().currency_symbol
    snapshot = store.get_snapshot()
    if snapshot is None:
        _render_home_setup(store)
        return

    st.sidebar.header(snapshot.home.name)
    st.sidebar.caption(f"Share code: {snapshot.home.share_code}")
    if st.sidebar.button("Leave home"):
        ResetHomeUseCase(store=store).execute()
        st.rerun()

    page = st.sidebar.selectbox("Page", PAGES)
    if page == "Members":
        _render_members(store, snapshot, symbol)
    elif page == "Expenses":
        _render_expenses(store, snapshot, symbol)
    else:
        _render_dashboard(store, snapshot, symbol)


if __name__ == "__main__":  # pragma: no cover
    main()
