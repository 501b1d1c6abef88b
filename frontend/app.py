import streamlit as st
from streamlit_js_eval import get_geolocation

from skypulse_ui.api_client import BACKEND_URL, check_backend_health, fetch_weather, search_cities
from skypulse_ui.autocomplete import Autocomplete
from skypulse_ui.charts import temperature_trend_figure
from skypulse_ui.display import (
    POLLUTANT_LABELS,
    TREND_MESSAGES,
    aqi_color,
    background,
    health_advice,
    trend_insight,
    weather_emoji,
    wind_rotation,
)
from skypulse_ui.history import add_to_history, load_history, save_history
from skypulse_ui.search_input import city_search_box
from skypulse_ui.state import Error, Idle, Loaded, apply_search_result

# Page configuration
st.set_page_config(
    page_title="SkyPulse",
    page_icon="🌤️",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Initialize session state
if "view" not in st.session_state:
    st.session_state.view = Idle()

if "autocomplete" not in st.session_state:
    st.session_state.autocomplete = Autocomplete(search_cities)

if "compare_weather" not in st.session_state:
    st.session_state.compare_weather = None

if "history_seq" not in st.session_state:
    st.session_state.history_seq = 0

if "city_text" not in st.session_state:
    st.session_state.city_text = ""
    st.session_state.city_input_seq = 0

if "locating" not in st.session_state:
    st.session_state.locating = False

# localStorage answers on the second run; until then history stays unset
if "history" not in st.session_state:
    loaded = load_history()
    if loaded is not None:
        st.session_state.history = loaded

def queue_search(city: str = None):
    """Widget callback: remember which city to resolve on this run."""
    st.session_state.pending_search = city or st.session_state.city_text

def queue_location():
    st.session_state.locating = True

@st.dialog("Search failed")
def show_alert(message: str):
    st.write(message)

def run_search(city: str, remember: bool = True):
    """Resolve a snapshot and move the view state; history only grows on success."""
    if not city:
        return
    with st.spinner(f"🔍 Fetching weather for {city}..."):
        result = fetch_weather(city)

    st.session_state.view, alert = apply_search_result(st.session_state.view, result)
    if alert:
        show_alert(alert)
        return

    shown_city = city if remember else result.get("city", city)
    st.session_state.autocomplete.clear(shown_city)
    st.session_state.city_text = shown_city
    st.session_state.city_input_seq += 1
    if remember:
        history = add_to_history(st.session_state.get("history", []), city)
        st.session_state.history = history
        st.session_state.history_seq += 1
        save_history(history, st.session_state.history_seq)

# Searches queued by callbacks run before any widget is drawn
if st.session_state.get("pending_search") is not None:
    run_search(st.session_state.pending_search)
    del st.session_state.pending_search

if st.session_state.locating:
    position = get_geolocation()
    if position is not None:
        st.session_state.locating = False
        coords = position.get("coords") if isinstance(position, dict) else None
        if coords:
            run_search(f"{coords['latitude']},{coords['longitude']}", remember=False)
        else:
            show_alert("Location permission denied.")

view = st.session_state.view
snapshot = view.snapshot if isinstance(view, Loaded) else None
page_background = background(snapshot["current"]["condition_text"] if snapshot else None)

# Custom CSS
st.markdown(f"""
<style>
    .stApp {{
        background: {page_background};
        color: white;
    }}
    .main-header {{
        font-size: 2.5rem;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }}
    .aqi-badge {{
        display: inline-block;
        padding: 6px 12px;
        border-radius: 20px;
        color: black;
        font-weight: bold;
    }}
    .wind-arrow {{
        display: inline-block;
        font-size: 30px;
    }}
    iframe[src*="streamlit_js_eval"] {{ display: none !important; }}
</style>
""", unsafe_allow_html=True)

# Sidebar
with st.sidebar:
    st.header("⚙️ Settings")

    if check_backend_health():
        st.success("✅ Backend Connected")
    else:
        st.warning(f"⚠️ Backend Disconnected\n\nExpected at `{BACKEND_URL}`")

    st.divider()

    st.subheader("🕘 Recent Searches")
    history = st.session_state.get("history", [])
    if not history:
        st.caption("No searches yet.")
    for h in history:
        st.button(h, key=f"history_{h}", on_click=queue_search, args=(h,), use_container_width=True)

# Header
st.markdown('<div class="main-header">🌤️ SkyPulse</div>', unsafe_allow_html=True)

# --- Search ---
col_input, col_search, col_locate = st.columns([4, 1, 1])
with col_input:
    st.session_state.city_text = city_search_box(
        st.session_state.autocomplete,
        value=st.session_state.city_text,
        seq=st.session_state.city_input_seq,
    )
with col_search:
    st.button("Search", on_click=queue_search, use_container_width=True)
with col_locate:
    st.button("📍 Use My Location", on_click=queue_location, use_container_width=True)

@st.fragment(run_every=0.5)
def suggestion_list():
    # Polls the debounced results gathered on the autocomplete timer thread
    for i, s in enumerate(st.session_state.autocomplete.suggestions):
        label = f"{s.get('name')}, {s.get('region')}"
        full = f"{s.get('name')}, {s.get('region')}, {s.get('country')}"
        if st.button(label, key=f"suggestion_{i}_{full}"):
            queue_search(full)
            st.rerun()

suggestion_list()

if isinstance(view, Idle):
    st.info("Search for a city to see current conditions and a 14 day forecast.")
elif isinstance(view, Error):
    st.error(view.message)
else:
    current = snapshot["current"]
    forecast = snapshot["forecast"]

    # --- Current weather ---
    st.subheader(f"{snapshot['city']}, {snapshot['country']}")
    st.caption(f"Local time: {snapshot['local_time']}")

    col_temp, col_wind, col_air = st.columns(3)
    with col_temp:
        st.metric("Temperature", f"{current['temperature']}°C")
        st.write(f"{current['condition_text']} {weather_emoji(current['condition_text'])}")
        st.write(f"Feels Like: {current['feels_like']}°C")
        st.write(f"Humidity: {current['humidity']}% · Pressure: {current['pressure']} mb")
    with col_wind:
        rotation = wind_rotation(current["wind_direction"])
        st.markdown(
            f'<span class="wind-arrow" style="transform: rotate({rotation}deg);">↑</span>',
            unsafe_allow_html=True,
        )
        st.write(f"Wind: {current['wind_speed']} km/h ({current['wind_direction']})")
    with col_air:
        aqi = current.get("aqi")
        st.markdown(
            f'<span class="aqi-badge" style="background: {aqi_color(aqi)};">AQI: {aqi if aqi is not None else "N/A"}</span>',
            unsafe_allow_html=True,
        )
        if aqi is not None:
            st.write(f"Health advice: {health_advice(aqi).capitalize()}")
        details = current.get("pollutant_details")
        if details:
            for field, label in POLLUTANT_LABELS:
                if field in details:
                    st.write(f"{label}: {details[field]}")

    # --- Forecast ---
    st.subheader(f"{len(forecast)} Day Forecast")
    for day in forecast:
        st.write(
            f"{day['date']} — {weather_emoji(day['condition_text'])} {day['condition_text']} — "
            f"{day['max_temp']}°C / {day['min_temp']}°C  \n"
            f"🌅 {day['sunrise']} | 🌇 {day['sunset']}"
        )

    # --- Graph ---
    st.subheader(f"Temperature Trend ({len(forecast)} Days)")
    st.plotly_chart(temperature_trend_figure(forecast), use_container_width=True)
    st.write(TREND_MESSAGES[trend_insight(forecast)])

    # --- Compare ---
    st.subheader("Compare City")
    col_compare_input, col_compare_button = st.columns([4, 1])
    with col_compare_input:
        compare_city = st.text_input("Compare with", placeholder="Enter city", label_visibility="collapsed")
    with col_compare_button:
        if st.button("Compare", use_container_width=True) and compare_city:
            st.session_state.compare_weather = fetch_weather(compare_city)

    compare = st.session_state.compare_weather
    if compare is not None:
        if "error" in compare:
            st.error(compare["error"])
        else:
            left, right = st.columns(2)
            for column, data in ((left, snapshot), (right, compare)):
                with column:
                    cur = data["current"]
                    st.markdown(f"**{data['city']}, {data['country']}**")
                    st.metric("Temperature", f"{cur['temperature']}°C")
                    st.write(f"{weather_emoji(cur['condition_text'])} {cur['condition_text']}")
                    st.write(f"Humidity: {cur['humidity']}% · Wind: {cur['wind_speed']} km/h")

# Footer
st.divider()
st.markdown("""
<div style='text-align: center; color: #999; padding: 1rem;'>
    <small>Powered by FastAPI & WeatherAPI.com | Made with ❤️ using Streamlit</small>
</div>
""", unsafe_allow_html=True)
