"""
pyjump - jump to an application window, or launch the application
"""
