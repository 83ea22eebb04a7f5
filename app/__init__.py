"""
Streamlit front end for the savings calculator.
"""
