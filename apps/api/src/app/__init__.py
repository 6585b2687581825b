"""
Internship Enrollment API
"""
