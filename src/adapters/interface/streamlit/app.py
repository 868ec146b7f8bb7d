"""Streamlit entry point for the bullion ledger."""

from dataclasses import dataclass
from datetime import date

import altair as alt
import streamlit as st

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.ports.identity_provider import (
    IdentityProviderPort,
    UserSession,
)
from src.application.ports.report_renderer import ReportRendererPort
from src.application.use_cases.archive_entries import (
    ArchiveEntryUseCase,
    RestoreEntriesUseCase,
)
from src.application.use_cases.export_reports import (
    ExportArchivedEntriesUseCase,
    ExportCurrentEntriesUseCase,
)
from src.application.use_cases.get_customer_dashboard import (
    CustomerDashboard,
    GetCustomerDashboardUseCase,
)
from src.application.use_cases.get_customer_ledger import (
    GetCustomerLedgerUseCase,
    LedgerView,
)
from src.application.use_cases.manage_customers import (
    AddCustomerUseCase,
    DeleteCustomerUseCase,
    RenameCustomerUseCase,
)
from src.application.use_cases.record_entry import (
    EditEntryUseCase,
    RecordEntryUseCase,
)
from src.application.use_cases.rollover_ledger import RolloverLedgerUseCase
from src.adapters.interface.streamlit.ledger_views import (
    balance_chart_data,
    customers_table,
    entries_of_type,
    entries_table,
    entry_option_label,
    format_balance,
    wastage_placeholder,
)
from src.domain.constants import CREDIT, DEBIT, ENTRY_TYPES
from src.domain.exceptions import (
    InvalidInput,
    LedgerError,
    NothingToExport,
    NothingToSettle,
    PartialSettlementFailure,
)
from src.domain.models.reports import format_weight
from src.domain.policies.customer_filters import BALANCE_FILTERS, SORT_ORDERS
from src.domain.policies.settlement import SettlementRemovalPolicy
from src.infrastructure.container import (
    build_customer_repository,
    build_entry_repository,
    build_identity_provider,
    build_removal_policy,
    build_report_renderer,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings

SESSION_PROVIDER = "identity_provider"
SESSION_CUSTOMER = "selected_customer_id"
SESSION_WASTAGE = "last_wastage"
SESSION_PARTIAL = "pending_rollover_failure"
SESSION_ARCHIVED_REPORT = "archived_report"
SESSION_CURRENT_REPORT = "current_report"
PREPARED_REPORT_KEYS = (SESSION_CURRENT_REPORT, SESSION_ARCHIVED_REPORT)
SIGN_OUT_KEYS = (
    SESSION_CUSTOMER,
    SESSION_WASTAGE,
    SESSION_PARTIAL,
    *PREPARED_REPORT_KEYS,
)


@dataclass(frozen=True)
class LedgerServices:
    """Adapters shared by every page of the app."""

    customer_repository: CustomerRepositoryPort
    entry_repository: EntryRepositoryPort
    renderer: ReportRendererPort
    removal_policy: SettlementRemovalPolicy
    settings: LedgerSettings


def _build_services() -> LedgerServices:
    """Wire repositories and the renderer from the environment."""
    settings = LedgerSettings.from_env()
    return LedgerServices(
        customer_repository=build_customer_repository(),
        entry_repository=build_entry_repository(),
        renderer=build_report_renderer(),
        removal_policy=build_removal_policy(settings),
        settings=settings,
    )


@st.cache_resource(show_spinner=False)
def _load_services() -> LedgerServices:
    """Cached wrapper around _build_services for the server process."""
    return _build_services()


def _get_identity_provider() -> IdentityProviderPort:
    """Return the identity provider bound to this browser session."""
    if SESSION_PROVIDER not in st.session_state:
        st.session_state[SESSION_PROVIDER] = build_identity_provider()
    return st.session_state[SESSION_PROVIDER]


def _fetch_dashboard(
    services: LedgerServices,
    owner_id: str,
    query: str,
    balance_filter: str,
    sort_by: str,
) -> CustomerDashboard:
    """Fetch the customer list and dashboard figures."""
    use_case = GetCustomerDashboardUseCase(
        customer_repository=services.customer_repository,
        entry_repository=services.entry_repository,
    )
    return use_case.execute(
        owner_id,
        query=query,
        balance_filter=balance_filter,
        sort_by=sort_by,
    )


def _fetch_ledger(
    services: LedgerServices,
    customer_id: str,
    owner_id: str,
) -> LedgerView:
    """Fetch one customer's ledger."""
    use_case = GetCustomerLedgerUseCase(
        customer_repository=services.customer_repository,
        entry_repository=services.entry_repository,
    )
    return use_case.execute(customer_id, owner_id)


def _render_auth(provider: IdentityProviderPort) -> None:
    """Render the sign-in and sign-up forms."""
    st.title("Bullion Ledger")
    sign_in_tab, sign_up_tab = st.tabs(["Sign in", "Sign up"])
    with sign_in_tab:
        with st.form("sign_in"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign in")
        if submitted:
            try:
                provider.sign_in(email, password)
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.rerun()
    with sign_up_tab:
        with st.form("sign_up"):
            email = st.text_input("Email", key="sign_up_email")
            password = st.text_input(
                "Password",
                type="password",
                key="sign_up_password",
            )
            submitted = st.form_submit_button("Create account")
        if submitted:
            try:
                provider.sign_up(email, password)
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.rerun()


def _render_balance_chart(dashboard: CustomerDashboard) -> None:
    """Render a bar chart of the largest customer balances."""
    data = balance_chart_data(dashboard.customers)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("balance:Q", title="Balance"),
        y=alt.Y("customer:N", sort="-x", title=None),
        color=alt.Color(
            "side:N",
            scale=alt.Scale(
                domain=["Credit", "Debit"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("customer:N"),
            alt.Tooltip("balance_label:N"),
        ],
    )
    st.subheader("Largest balances")
    st.altair_chart(chart, width="stretch")


def _render_dashboard(services: LedgerServices, session: UserSession) -> None:
    """Render the customer list with search, filters, and management."""
    query = st.sidebar.text_input("Search customers", placeholder="Name")
    balance_filter = st.sidebar.selectbox("Balance", list(BALANCE_FILTERS))
    sort_by = st.sidebar.selectbox("Sort by", list(SORT_ORDERS))
    dashboard = _fetch_dashboard(
        services,
        session.user_id,
        query,
        balance_filter,
        sort_by,
    )

    stats = dashboard.stats
    columns = st.columns(5)
    columns[0].metric("Customers", stats.total_customers)
    columns[1].metric("Total Balance", format_weight(stats.total_balance))
    columns[2].metric("Credit Balances", stats.positive_balances)
    columns[3].metric("Debit Balances", stats.negative_balances)
    columns[4].metric("Active Entries", stats.total_entries)

    with st.form("add_customer", clear_on_submit=True):
        name = st.text_input("New customer name")
        if st.form_submit_button("Add customer"):
            try:
                AddCustomerUseCase(services.customer_repository).execute(
                    session.user_id,
                    name,
                )
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.rerun()

    if not dashboard.customers:
        st.info("No customers match the current filters.")
        return

    st.caption(f"{len(dashboard.customers)} customers shown")
    st.dataframe(
        customers_table(dashboard.customers),
        width="stretch",
        hide_index=True,
    )
    _render_balance_chart(dashboard)

    by_id = {summary.customer.id: summary for summary in dashboard.customers}
    selected_id = st.selectbox(
        "Customer",
        options=list(by_id),
        format_func=lambda customer_id: by_id[customer_id].name,
    )
    open_col, rename_col, delete_col = st.columns(3)
    if open_col.button("Open ledger"):
        st.session_state[SESSION_CUSTOMER] = selected_id
        st.rerun()
    with rename_col:
        new_name = st.text_input("Rename to", key="rename_customer")
        if st.button("Rename"):
            try:
                RenameCustomerUseCase(services.customer_repository).execute(
                    selected_id,
                    session.user_id,
                    new_name,
                )
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.rerun()
    with delete_col:
        confirmed = st.checkbox(
            f"Delete {by_id[selected_id].name} and all entries"
        )
        if st.button("Delete", disabled=not confirmed):
            try:
                DeleteCustomerUseCase(services.customer_repository).execute(
                    selected_id,
                    session.user_id,
                )
            except LedgerError as exc:
                st.error(str(exc))
            else:
                st.rerun()


def _refresh() -> None:
    """Drop prepared reports after a ledger change and rerun the page."""
    for key in PREPARED_REPORT_KEYS:
        st.session_state.pop(key, None)
    st.rerun()


def _prepared_report(key: str, customer_id: str):
    """Return the report prepared for this customer, if any."""
    prepared = st.session_state.get(key)
    if prepared is None:
        return None
    owner_customer_id, report = prepared
    if owner_customer_id != customer_id:
        st.session_state.pop(key, None)
        return None
    return report


def _render_entry_form(
    services: LedgerServices,
    session: UserSession,
    ledger: LedgerView,
) -> None:
    """Render the form adding an entry, remembering the last wastage."""
    remembered = st.session_state.get(SESSION_WASTAGE)
    with st.form("add_entry", clear_on_submit=True):
        type_col, date_col = st.columns(2)
        entry_type = type_col.radio("Type", list(ENTRY_TYPES), horizontal=True)
        entry_date = date_col.date_input("Date", value=date.today())
        gross_col, melting_col, wastage_col = st.columns(3)
        gross = gross_col.text_input("Gross weight")
        melting = melting_col.text_input("Melting", placeholder="% or F")
        wastage = wastage_col.text_input(
            "Wastage",
            placeholder=wastage_placeholder(remembered),
        )
        submitted = st.form_submit_button("Add entry")
    if not submitted:
        return
    try:
        result = RecordEntryUseCase(
            services.customer_repository,
            services.entry_repository,
        ).execute(
            ledger.customer.id,
            session.user_id,
            entry_type,
            entry_date,
            gross,
            melting,
            wastage=wastage,
            last_wastage=remembered,
        )
    except LedgerError as exc:
        st.error(str(exc))
        return
    st.session_state[SESSION_WASTAGE] = result.remembered_wastage
    _refresh()


def _render_active_side(
    services: LedgerServices,
    session: UserSession,
    ledger: LedgerView,
    entry_type: str,
) -> None:
    """Render one side of the active ledger with archive and edit."""
    entries = entries_of_type(ledger.active, entry_type)
    st.subheader(entry_type.capitalize())
    if not entries:
        st.caption(f"No active {entry_type} entries.")
        return
    st.dataframe(entries_table(entries), width="stretch", hide_index=True)
    by_id = {entry.id: entry for entry in entries}
    selected_id = st.selectbox(
        "Entry",
        options=list(by_id),
        format_func=lambda entry_id: entry_option_label(by_id[entry_id]),
        key=f"select_{entry_type}",
    )
    entry = by_id[selected_id]
    if st.button("Archive", key=f"archive_{entry_type}"):
        try:
            ArchiveEntryUseCase(
                services.customer_repository,
                services.entry_repository,
            ).execute(ledger.customer.id, session.user_id, entry.id)
        except LedgerError as exc:
            st.error(str(exc))
        else:
            _refresh()
    with st.expander("Edit entry"):
        with st.form(f"edit_{entry_type}"):
            entry_date = st.date_input("Date", value=entry.date)
            gross = st.text_input("Gross weight", value=str(entry.gross_weight))
            melting = st.text_input("Melting", value=entry.melting)
            wastage = st.text_input(
                "Wastage",
                value="" if entry.wastage is None else str(entry.wastage),
            )
            submitted = st.form_submit_button("Save")
        if submitted:
            try:
                EditEntryUseCase(
                    services.customer_repository,
                    services.entry_repository,
                ).execute(
                    ledger.customer.id,
                    session.user_id,
                    entry.id,
                    entry_date,
                    gross,
                    melting,
                    wastage=wastage,
                )
            except LedgerError as exc:
                st.error(str(exc))
            else:
                _refresh()


def _render_archived(
    services: LedgerServices,
    session: UserSession,
    ledger: LedgerView,
) -> None:
    """Render archived entries with restore buttons per type."""
    st.subheader("Archived entries")
    if not ledger.archived:
        st.caption("No archived entries.")
        return
    for entry_type in ENTRY_TYPES:
        entries = entries_of_type(ledger.archived, entry_type)
        if not entries:
            continue
        st.markdown(f"**{entry_type.capitalize()}** ({len(entries)})")
        st.dataframe(entries_table(entries), width="stretch", hide_index=True)
        if st.button(
            f"Restore all archived {entry_type} entries",
            key=f"restore_{entry_type}",
        ):
            try:
                RestoreEntriesUseCase(
                    services.customer_repository,
                    services.entry_repository,
                ).execute(ledger.customer.id, session.user_id, entry_type)
            except LedgerError as exc:
                st.error(str(exc))
            else:
                _refresh()


def _render_rollover(
    services: LedgerServices,
    session: UserSession,
    ledger: LedgerView,
) -> None:
    """Render the rollover button and any pending reconciliation."""
    use_case = RolloverLedgerUseCase(
        services.customer_repository,
        services.entry_repository,
        policy=services.removal_policy,
    )
    pending = st.session_state.get(SESSION_PARTIAL)
    if pending is not None and pending.customer_id == ledger.customer.id:
        st.error(str(pending))
        if st.button("Retry clearing settled entries"):
            try:
                use_case.retry_removal(pending, session.user_id)
            except LedgerError as exc:
                st.error(str(exc))
            else:
                del st.session_state[SESSION_PARTIAL]
                _refresh()
        return

    if st.button("Roll over balance"):
        try:
            use_case.execute(ledger.customer.id, session.user_id)
        except NothingToSettle as exc:
            st.info(str(exc))
        except PartialSettlementFailure as exc:
            st.session_state[SESSION_PARTIAL] = exc
            _refresh()
        except LedgerError as exc:
            st.error(str(exc))
        else:
            _refresh()


def _render_exports(
    services: LedgerServices,
    session: UserSession,
    ledger: LedgerView,
) -> None:
    """Render the current and archived PDF downloads.

    Both reports are rendered on request and kept in the session with the
    customer they were prepared for.
    """
    customer_id = ledger.customer.id
    st.subheader("Reports")
    current_col, archived_col = st.columns(2)
    with current_col:
        if st.button("Prepare current report"):
            try:
                st.session_state[SESSION_CURRENT_REPORT] = (
                    customer_id,
                    ExportCurrentEntriesUseCase(
                        services.customer_repository,
                        services.entry_repository,
                        services.renderer,
                        single_column_threshold=(
                            services.settings.single_column_threshold
                        ),
                    ).execute(customer_id, session.user_id),
                )
            except (InvalidInput, NothingToExport) as exc:
                st.session_state.pop(SESSION_CURRENT_REPORT, None)
                st.warning(str(exc))
        current = _prepared_report(SESSION_CURRENT_REPORT, customer_id)
        if current is not None:
            st.download_button(
                "Download current entries",
                data=current.content,
                file_name=current.filename,
                mime=current.mime_type,
            )
    with archived_col:
        start_date = st.date_input("From", value=None, key="archived_from")
        end_date = st.date_input("To", value=None, key="archived_to")
        if st.button("Prepare archived report"):
            try:
                st.session_state[SESSION_ARCHIVED_REPORT] = (
                    customer_id,
                    ExportArchivedEntriesUseCase(
                        services.customer_repository,
                        services.entry_repository,
                        services.renderer,
                    ).execute(customer_id, session.user_id, start_date, end_date),
                )
            except (InvalidInput, NothingToExport) as exc:
                st.session_state.pop(SESSION_ARCHIVED_REPORT, None)
                st.warning(str(exc))
        archived = _prepared_report(SESSION_ARCHIVED_REPORT, customer_id)
        if archived is not None:
            st.download_button(
                "Download archived entries",
                data=archived.content,
                file_name=archived.filename,
                mime=archived.mime_type,
            )


def _render_ledger(
    services: LedgerServices,
    session: UserSession,
    customer_id: str,
) -> None:
    """Render one customer's ledger page."""
    if st.sidebar.button("Back to customers"):
        st.session_state.pop(SESSION_CUSTOMER, None)
        for key in PREPARED_REPORT_KEYS:
            st.session_state.pop(key, None)
        st.rerun()
    try:
        ledger = _fetch_ledger(services, customer_id, session.user_id)
    except InvalidInput as exc:
        st.session_state.pop(SESSION_CUSTOMER, None)
        st.warning(str(exc))
        return

    st.header(ledger.customer.name)
    summary = ledger.summary
    credit_col, debit_col, balance_col = st.columns(3)
    credit_col.metric("Credit", format_weight(summary.credit_total))
    debit_col.metric("Debit", format_weight(summary.debit_total))
    balance_col.metric("Balance", format_balance(summary.balance))

    _render_entry_form(services, session, ledger)
    left, right = st.columns(2)
    with left:
        _render_active_side(services, session, ledger, CREDIT)
    with right:
        _render_active_side(services, session, ledger, DEBIT)
    _render_rollover(services, session, ledger)
    _render_archived(services, session, ledger)
    _render_exports(services, session, ledger)


def _sign_out(provider: IdentityProviderPort, session: UserSession) -> None:
    """End the session and forget every per-user value."""
    pending = st.session_state.get(SESSION_PARTIAL)
    if pending is not None:
        get_app_logger().warning(
            f"Sign-out by user={session.user_id} leaves rollover for "
            f"customer={pending.customer_id} unreconciled: settlement entry "
            f"id={pending.inserted_entry.id} is stored but settled entries "
            f"were not removed"
        )
    provider.sign_out()
    for key in SIGN_OUT_KEYS:
        st.session_state.pop(key, None)
    st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Bullion Ledger", layout="wide")
    provider = _get_identity_provider()
    session = provider.current_session()
    if session is None:
        _render_auth(provider)
        return

    st.sidebar.caption(f"Signed in as {session.email}")
    if st.sidebar.button("Sign out"):
        _sign_out(provider, session)
        return

    services = _load_services()
    try:
        customer_id = st.session_state.get(SESSION_CUSTOMER)
        if customer_id:
            _render_ledger(services, session, customer_id)
        else:
            st.title("Customers")
            _render_dashboard(services, session)
    except LedgerError as exc:
        get_app_logger().error(f"Page failed for user={session.user_id}: {exc}")
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
