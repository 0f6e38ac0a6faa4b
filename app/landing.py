import streamlit as st

from navigation import navigate

# --- INDEX CONTENT ---
FEATURES = [
    ("📅", "Appointment management", "A complete system to schedule and manage appointments efficiently."),
    ("👥", "Customer management", "Keep a detailed record of all your customers and their history."),
    ("🕘", "Flexible hours", "Set custom working hours for your business."),
    ("⭐", "Custom services", "Define your services with specific prices and durations."),
    ("⚡", "Instant bookings", "Your customers can book straight from your public link."),
    ("🛡️", "Secure data", "All your information is protected with strong security."),
]

TESTIMONIALS = [
    ("María García", "Luna Beauty Salon",
     "Since I started using this platform my bookings went up 40%. It's very easy to use."),
    ("Carlos Ruiz", "Dental Practice",
     "My patients can book appointments 24/7. It has really improved their experience."),
    ("Ana López", "Massage Centre",
     "Managing opening hours is perfect. Appointments never overlap any more."),
]

# --- DEMO CONTENT ---
DEMO_FEATURES = [
    ("📅", "Appointment management", "Book appointments easily with an intuitive calendar", "See the live calendar"),
    ("👥", "Customer base", "Keep all your customer information organised", "Explore customers"),
    ("⚙️", "Service setup", "Define price, duration and details for every service", "Configure services"),
    ("📊", "Reports and analytics", "Analyse your business performance with detailed reports", "View statistics"),
]

BENEFITS = [
    "Increase your bookings by up to 40%",
    "Cut admin time by 3 hours a day",
    "Eliminate double bookings and mistakes",
    "Improve customer satisfaction",
    "24/7 access from any device",
    "Automatic email and SMS notifications",
]

STEPS = [
    ("01", "Sign up", "Create your free account in under 2 minutes"),
    ("02", "Set up your business", "Add your services, hours and basic information"),
    ("03", "Share your link", "Customers book directly from your personal link"),
    ("04", "Manage and grow", "Handle every appointment from one place"),
]


def render_index():
    st.title("📅 Booking Hub")
    st.subheader("The simplest way to manage appointments for your business")

    c1, c2, c3 = st.columns(3)
    if c1.button("Get started", type="primary", use_container_width=True):
        navigate("/auth")
    if c2.button("See demo", use_container_width=True):
        navigate("/demo")
    if c3.button("Browse businesses", use_container_width=True):
        navigate("/businesses")

    st.divider()
    st.header("Everything your business needs")
    cols = st.columns(3)
    for i, (icon, title, description) in enumerate(FEATURES):
        with cols[i % 3].container(border=True):
            st.markdown(f"### {icon} {title}")
            st.write(description)

    st.divider()
    st.header("What our customers say")
    cols = st.columns(3)
    for col, (name, business, quote) in zip(cols, TESTIMONIALS):
        with col.container(border=True):
            st.write(f"“{quote}”")
            st.caption(f"**{name}** · {business}")


def render_demo():
    st.title("🎬 Interactive demo")
    st.subheader("See how Booking Hub can change the way you run your business")

    st.divider()
    cols = st.columns(2)
    for i, (icon, title, description, demo) in enumerate(DEMO_FEATURES):
        with cols[i % 2].container(border=True):
            st.markdown(f"### {icon} {title}")
            st.write(description)
            st.caption(f"▶ {demo}")

    st.divider()
    st.header("Why choose us")
    for benefit in BENEFITS:
        st.write(f"✅ {benefit}")

    st.divider()
    st.header("How it works")
    cols = st.columns(4)
    for col, (number, title, description) in zip(cols, STEPS):
        with col:
            st.markdown(f"## {number}")
            st.markdown(f"**{title}**")
            st.caption(description)

    if st.button("Start free", type="primary"):
        navigate("/auth")
