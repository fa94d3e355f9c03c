"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_DATABASE_URL = "sqlite:///event_checkin.db"
DEFAULT_DATA_FILE = "registrations.json"
DEFAULT_EXPORT_FILENAME = "attendance.xlsx"
EXPORT_SHEET_NAME = "Attendance"
EXPORT_COLUMNS = ["ID", "Name", "Email", "Roll", "Attended"]
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Largest id a signed 64-bit INTEGER column can hold; ids above it were never issued
MAX_REGISTRATION_ID = 2**63 - 1
