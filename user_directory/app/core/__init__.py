"""
Infrastructure shared by the whole application: settings, logging
setup, the error taxonomy and the user store.
"""
