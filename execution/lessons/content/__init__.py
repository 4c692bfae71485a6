"""Packaged lesson documents, laid out as tutorials/<lesson_id>/<lesson_id>.md."""
