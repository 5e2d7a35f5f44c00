"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RECENT_ACTIVITY_LIMIT = 20
UNKNOWN_EMPLOYEE_NAME = "Unknown"
DATE_DISPLAY_FORMAT = "%d/%m/%Y"

WAGE_SUMMARY_HEADER = ("Employee Name", "Employee ID", "Present Days", "Wage")
MONTHLY_ATTENDANCE_HEADER = ("Employee Name", "Employee ID", "Present Days", "Absent Days")
ACTIVITY_HEADER = ("Date", "Employee", "Status")
ROSTER_HEADER = ("Name", "Phone", "Type", "Status", "Aadhar", "PAN")
CSV_HEADER = ("Employee Name", "Employee ID", "Mobile", "Status", "Date", "Marked By", "Company ID")
