"""Attendance authentication package.

Login/logout and the forgot-password flow for the attendance system, split
into a Flask API (users), a client session layer (session), the identity
service bridge (identity, password_reset) and transactional e-mail (mail).
"""
