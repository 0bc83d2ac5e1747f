# estate_console/app.py
#
# Run: streamlit run estate_console/app.py   (API_BASE defaults to http://localhost:5000)
import streamlit as st
import pandas as pd
from PIL import Image

from estate_console import client

st.set_page_config(page_title="Estate Showcase Admin", layout="wide")

LABELS = {
    "properties": {"title": "Properties", "singular": "property"},
    "projects": {"title": "Projects", "singular": "project"},
}

st.title("Estate Showcase Admin")
st.caption(f"Backend: {client.API_BASE}")

# -------------------------------
# Helpers
# -------------------------------
def render_create_form(kind: str):
    singular = LABELS[kind]["singular"]
    with st.form(f"create_{kind}", clear_on_submit=True):
        values = {}
        for field in client.RESOURCE_FIELDS[kind]:
            if field == "description":
                values[field] = st.text_area("Description")
            else:
                values[field] = st.text_input(field.capitalize())
        uploaded = st.file_uploader("Image (optional, max 5 MB)", type=["jpg", "jpeg", "png", "gif"], key=f"image_{kind}")
        if uploaded is not None:
            st.image(Image.open(uploaded).convert("RGB"), caption="Preview", width=240)
        submitted = st.form_submit_button(f"Add {singular}")
        if submitted:
            image = (uploaded.name, uploaded.getvalue(), uploaded.type) if uploaded is not None else None
            try:
                created = client.create_record(kind, values, image=image)
                st.success(f"Added {singular} #{created.get('id')}")
            except Exception as e:
                st.error(f"Could not add {singular}: {e}")

def render_listing(kind: str):
    try:
        rows = client.list_records(kind)
    except Exception as e:
        st.error(f"Could not fetch {kind}: {e}")
        rows = []
    if not rows:
        st.info(f"No {kind} yet")
        return
    df = pd.DataFrame(rows)
    columns = ["id", *client.RESOURCE_FIELDS[kind], "image"]
    st.dataframe(df.reindex(columns=columns).reset_index(drop=True))

    with_images = [r for r in rows if r.get("image")]
    if with_images:
        cols = st.columns(min(len(with_images), 4))
        for i, row in enumerate(with_images):
            with cols[i % len(cols)]:
                st.image(client.image_url(row), caption=f"#{row.get('id')} {row.get('name') or ''}", width=200)

def render_delete(kind: str):
    singular = LABELS[kind]["singular"]
    record_id = st.number_input(f"{singular.capitalize()} id", min_value=1, step=1, key=f"delete_id_{kind}")
    if st.button(f"Delete {singular}", key=f"delete_{kind}"):
        try:
            st.write(client.delete_record(kind, int(record_id)))
        except Exception as e:
            st.error(f"Delete failed: {e}")

# -------------------------------
# Tabs
# -------------------------------
tabs = st.tabs([LABELS[k]["title"] for k in client.RESOURCE_FIELDS])
for tab, kind in zip(tabs, client.RESOURCE_FIELDS):
    with tab:
        st.header(LABELS[kind]["title"])
        left, right = st.columns([1, 2])
        with left:
            st.subheader("Add")
            render_create_form(kind)
            st.subheader("Delete")
            render_delete(kind)
        with right:
            st.subheader("Listing")
            render_listing(kind)
