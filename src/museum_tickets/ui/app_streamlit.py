"""
Streamlit UI for the Museum Ticket Calculator.

Features:
- Museum picker with adult/child price badges
- Visitor entry per category (invalid or negative input reads as 0)
- Itemized price summary with CSV export
- Catalog tab listing every museum's prices
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from museum_tickets.engine import PricingEngine, Category
from museum_tickets.engine.formatting import format_currency, format_price_label
from museum_tickets.config.settings import get_settings


settings = get_settings()

st.set_page_config(
    page_title=settings.page_title,
    layout="wide",
)


def field_key(category: Category) -> str:
    return f"visitors_{category.value}"


def sync_fields(engine: PricingEngine):
    """Write the engine's clamped counts back into the input fields."""
    for category, count in engine.visitors.items():
        st.session_state[field_key(category)] = str(count)


def get_engine() -> PricingEngine:
    """Get this session's engine, creating it on first run."""
    if 'engine' not in st.session_state:
        engine = PricingEngine(settings=settings)
        engine.subscribe(sync_fields)
        st.session_state.engine = engine
        sync_fields(engine)
    return st.session_state.engine


try:
    engine = get_engine()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


def on_select(museum_id: str):
    engine.select_museum(museum_id)


def on_count_change(category: Category):
    engine.set_visitor_count(category, st.session_state[field_key(category)])


def on_clear():
    engine.reset_counts()


# ============================================================================
# CUSTOM CSS & STYLING
# ============================================================================
st.markdown("""
    <style>
        .block-container {
            padding-top: 2rem;
            padding-bottom: 2rem;
            max-width: 64rem;
        }
        h1 {
            font-family: 'Helvetica Neue', Helvetica, Arial, sans-serif;
            font-weight: 700;
            text-align: center;
        }
        .stMetric {
            background-color: #f0f2f6;
            padding: 10px;
            border-radius: 5px;
            border-left: 5px solid #ff4b4b;
        }
    </style>
""", unsafe_allow_html=True)

st.title("🧮 " + settings.page_title)
st.caption("Calculate admission costs for New York City's premier museums")

tab1, tab2 = st.tabs(["🎟️ Calculator", "📚 Catalog"])


# ============================================================================
# TAB 1: CALCULATOR
# ============================================================================
with tab1:
    col1, col2 = st.columns(2, gap="large")

    with col1:
        st.subheader("📍 Select Museum")
        st.caption("Choose from NYC's most popular museums")

        symbol = settings.currency_symbol
        for museum in engine.catalog:
            is_selected = engine.selected is not None and engine.selected.id == museum.id
            with st.container(border=True):
                st.markdown(f"**{museum.name}**")
                st.caption(f"📍 {museum.location}")
                adult = format_price_label(museum.prices[Category.ADULT], symbol)
                child = format_price_label(museum.prices[Category.CHILD], symbol)
                st.markdown(f":gray-background[Adult: {adult}] &nbsp; :blue-background[Child: {child}]")
                st.button(
                    "✅ Selected" if is_selected else "Select",
                    key=f"select_{museum.id}",
                    type="primary" if is_selected else "secondary",
                    on_click=on_select,
                    args=(museum.id,),
                    width="stretch",
                )

    with col2:
        st.subheader("👥 Visitor Information")

        with st.container(border=True):
            if engine.selected is not None:
                st.caption("Enter the number of visitors by category")
                for category in Category:
                    price = format_price_label(engine.selected.prices[category], symbol)
                    st.text_input(
                        f"{category.value.capitalize()} - {price}",
                        key=field_key(category),
                        on_change=on_count_change,
                        args=(category,),
                    )
            else:
                st.info("📍 Please select a museum first")

        summary = engine.summary()
        if summary is not None:
            st.subheader("💲 Price Summary")

            with st.container(border=True):
                m1, m2 = st.columns(2)
                m1.metric("Total Cost", format_currency(summary.total, symbol))
                m2.metric("Total Visitors", summary.total_visitors)
                st.caption(f"**Museum:** {summary.museum.name}")

                st.divider()
                for line in summary.lines:
                    left, right = st.columns([3, 1])
                    left.markdown(line.label.capitalize())
                    right.markdown(format_currency(line.subtotal, symbol))

                st.divider()

                # Visual affordance only, no booking behind it
                st.button("Book Tickets", type="primary", width="stretch")

                btn_col1, btn_col2 = st.columns(2)
                with btn_col1:
                    export_df = pd.DataFrame(summary.to_records())
                    st.download_button(
                        "📥 CSV",
                        data=export_df.to_csv(index=False),
                        file_name=f"tickets_{summary.museum.id}.csv",
                        mime="text/csv",
                        width="stretch",
                    )
                with btn_col2:
                    st.button("🗑️ Clear", on_click=on_clear, width="stretch")

            with st.expander("🔍 Calculation Details"):
                st.text(summary.get_trace_text())


# ============================================================================
# TAB 2: CATALOG
# ============================================================================
with tab2:
    st.subheader("📚 Museum Prices")
    catalog_df = engine.catalog.to_frame()
    st.dataframe(
        catalog_df,
        width="stretch",
        hide_index=True,
        column_config={
            c.value.capitalize(): st.column_config.NumberColumn(format=f"{settings.currency_symbol}%.2f")
            for c in Category
        },
    )
    st.caption(f"Museums: {len(engine.catalog)}")
