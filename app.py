import logging

import streamlit as st

from stocksync.settings import LOG_LEVEL, OUTPUT_FILE_NAME
from stocksync.components import error_box_html, success_box_html
from stocksync.sync_engine import run_tracked_sync
from stocksync.sync_status import ERROR, PROCESSING, SUCCESS, SyncStatus

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

st.set_page_config(
    page_title="StockSync",
    page_icon="◼",
    layout="centered",
    initial_sidebar_state="collapsed"
)

st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');
    
    * {
        font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
    }
    
    .block-container {
        padding: 1.5rem 3rem 2rem 3rem;
        max-width: 900px;
    }
    
    #MainMenu, footer, header {visibility: hidden;}
    
    .header-bar {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding-bottom: 1.5rem;
        border-bottom: 1px solid #f0f0f0;
        margin-bottom: 2rem;
    }
    
    .logo {
        font-size: 1.1rem;
        font-weight: 600;
        color: #111;
        letter-spacing: -0.02em;
    }
    
    .instructions {
        font-size: 0.8rem;
        color: #666;
        line-height: 1.6;
        margin-bottom: 2rem;
    }
    
    .section-label {
        font-size: 0.6rem;
        color: #999;
        text-transform: uppercase;
        letter-spacing: 0.1em;
        margin-bottom: 0.75rem;
    }
    
    .error-box {
        background: #fef2f2;
        border: 1px solid #fecaca;
        border-radius: 8px;
        padding: 1.5rem;
        text-align: center;
        margin-top: 1.5rem;
    }
    
    .error-box .title {
        font-size: 0.9rem;
        font-weight: 600;
        color: #991b1b;
        margin-bottom: 0.5rem;
    }
    
    .error-box .message {
        font-size: 0.85rem;
        color: #7f1d1d;
        line-height: 1.5;
    }
    
    .success-box {
        background: #f8fdf8;
        border: 1px solid #d1fae5;
        border-radius: 8px;
        padding: 1.5rem;
        text-align: center;
        margin-top: 1.5rem;
    }
    
    .success-box .title {
        font-size: 0.9rem;
        font-weight: 600;
        color: #166534;
        margin-bottom: 0.5rem;
    }
    
    .success-box .message {
        font-size: 0.85rem;
        color: #166534;
    }
    
    .warning-note {
        font-size: 0.75rem;
        color: #854d0e;
        margin-top: 0.5rem;
    }
    
    .footer-note {
        text-align: center;
        font-size: 0.65rem;
        color: #ccc;
        margin-top: 3rem;
        padding-top: 1.5rem;
        border-top: 1px solid #f5f5f5;
    }
</style>
""", unsafe_allow_html=True)


if "sync_status" not in st.session_state:
    st.session_state.sync_status = SyncStatus()
if "sync_result" not in st.session_state:
    st.session_state.sync_result = None
if "upload_key" not in st.session_state:
    st.session_state.upload_key = 0

status = st.session_state.sync_status


st.markdown("""
    <div class="header-bar">
        <div class="logo">StockSync</div>
    </div>
    <div class="instructions">
        Upload the warehouse stock export and the Shopify product export.
        Shopify "On hand" quantities are replaced with the warehouse "Available Physical"
        quantity wherever the Shopify SKU matches a warehouse Item Number or Barcode.
    </div>
""", unsafe_allow_html=True)

col1, col2 = st.columns(2)
with col1:
    st.markdown('<div class="section-label">Warehouse File</div>', unsafe_allow_html=True)
    warehouse_file = st.file_uploader(
        '(.xlsx, .xls, .csv) with "Available Physical" and "Item Number" or "Barcode" columns.',
        type=["xlsx", "xls", "csv"],
        key=f"warehouse_{st.session_state.upload_key}"
    )
with col2:
    st.markdown('<div class="section-label">Shopify File</div>', unsafe_allow_html=True)
    shopify_file = st.file_uploader(
        '(.xlsx, .xls, .csv) with "Sku" & "On hand" columns.',
        type=["xlsx", "xls", "csv"],
        key=f"shopify_{st.session_state.upload_key}"
    )

button_disabled = warehouse_file is None or shopify_file is None or status.is_processing

if st.button("Process & Download", disabled=button_disabled, use_container_width=True):
    with st.spinner("Processing..."):
        result = run_tracked_sync(status, warehouse_file, shopify_file)

    if result["status"] == "success":
        st.session_state.sync_result = result
        # Clear the uploaders after a successful run
        st.session_state.upload_key += 1
        st.rerun()
    else:
        st.session_state.sync_result = None

state = status.state

if state == ERROR and status.error_message:
    st.markdown(error_box_html(status.error_message), unsafe_allow_html=True)

elif state == SUCCESS and st.session_state.sync_result:
    result = st.session_state.sync_result
    st.markdown(success_box_html(result["message"], result["warnings"]), unsafe_allow_html=True)
    st.download_button(
        f"Download {OUTPUT_FILE_NAME}",
        data=result["data"],
        file_name=result["file_name"],
        mime=result["content_type"],
        use_container_width=True
    )

elif state != PROCESSING:
    st.session_state.sync_result = None

st.markdown('<div class="footer-note">StockSync Inventory Sync Tool</div>', unsafe_allow_html=True)
