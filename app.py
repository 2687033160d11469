"""Launch with ``streamlit run app.py``."""

from record_dashboard.app import main

main()
