"""Record Dashboard: Streamlit pages over public demo APIs with client-side search, filters and pagination."""
