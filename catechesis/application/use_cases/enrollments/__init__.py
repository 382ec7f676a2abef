"""Enrollment use cases."""

from catechesis.application.use_cases.enrollments.enrollment_writer import EnrollmentWriter

__all__ = ["EnrollmentWriter"]
