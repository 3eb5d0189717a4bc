"""
KeyGuard license key management service Django project.
"""
