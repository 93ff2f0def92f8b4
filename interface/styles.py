"""Custom CSS for the Streamlit UI."""


def get_custom_css() -> str:
    return """
    <style>
    .main-header {
        font-size: 2.2rem;
        font-weight: 700;
        margin-bottom: 0.2rem;
    }
    .sub-header {
        color: #64748b;
        margin-bottom: 1.5rem;
    }
    .file-item {
        display: flex;
        justify-content: space-between;
        padding: 0.4rem 0.8rem;
        border: 1px solid #e2e8f0;
        border-radius: 6px;
        margin-bottom: 0.3rem;
    }
    .file-item .size {
        color: #64748b;
    }
    .status-ok { color: #22c55e; font-weight: 600; }
    .status-error { color: #ef4444; font-weight: 600; }
    .status-muted { color: #64748b; }
    </style>
    """
