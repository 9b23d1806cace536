"""
lessonsync — Lesson content publisher.

Validates the JSON lesson and manifest files of the Python-course app
and publishes them to a Supabase Storage bucket.
"""

__version__ = "1.0.0"
