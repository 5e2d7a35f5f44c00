"""Attendance Reports package.

Owner reports (wage summary, monthly attendance, bulk CSV) and the supervisor
profile (roster, recent activity, exports), organized by feature module with a
thin Flask controller layer over service/repository layers.
"""
