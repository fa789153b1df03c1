"""MFlix movie catalog: MongoDB data-access layer."""
