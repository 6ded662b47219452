import os

SITE_NAME = "ESTG-TSS"

ROLE_ADMIN = "Admin"
ROLE_CONTENT_CREATOR = "ContentCreator"

# Roles allowed inside the admin panel
ROLES_WITH_PANEL = [ROLE_ADMIN, ROLE_CONTENT_CREATOR]

# Roles allowed to manage content creator accounts
ROLES_MANAGE_CREATORS = [ROLE_ADMIN]

LOGIN_ADMIN = "admin"
LOGIN_CREATOR = "creator"

LOGIN_ENDPOINTS = {
    LOGIN_ADMIN: "/account/admin/login",
    LOGIN_CREATOR: "/account/creator/login",
}

TAB_UPDATES = "updates"
TAB_EVENTS = "events"
TAB_CREATORS = "creators"
TAB_PROFILE = "profile"

# (key, label, roles allowed); None means every panel role
ADMIN_TABS = [
    (TAB_UPDATES, "Updates", None),
    (TAB_EVENTS, "Events", None),
    (TAB_CREATORS, "Content Creators", ROLES_MANAGE_CREATORS),
]

DEFAULT_TAB = TAB_UPDATES

UPDATE_TYPES = [
    "Announcement",
    "News",
    "Exam",
    "Holiday",
    "Meeting",
    "Other",
]

ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
ALLOWED_ATTACHMENT_EXTENSIONS = {'pdf', 'doc', 'docx', 'xls', 'xlsx', 'ppt', 'pptx', 'txt', 'png', 'jpg', 'jpeg'}

MSG_FILL_REQUIRED = "Please fill out all required fields."
MSG_GENERIC_FAILURE = "Server error occurred."
MSG_NO_RESPONSE = "No response from server. Please check your internet connection."
MSG_UNEXPECTED = "An unexpected error occurred."

EMPTY_STATES = {
    'events': ("No Events Available", "Create your first event to see it listed here."),
    'updates': ("No Updates Available", "Post your first update to see it listed here."),
    'creators': ("No Content Creators Available", "Content creator accounts will appear here."),
    'public_events': ("No Events Found", "There are no published events yet. Check back soon."),
    'public_updates': ("No Announcements Found", "There are no announcements yet. Check back soon."),
}

NO_MATCH_STATES = {
    'events': ("No Matching Results", "No events matched your search. Try different keywords."),
    'updates': ("No Matching Results", "No updates matched your search. Try different keywords."),
    'creators': ("No Matching Results", "No content creators matched your search. Try different keywords."),
    'public_events': ("No Matching Events", "No events found for your search. Try a different keyword."),
    'public_updates': ("No Matching Announcements", "No announcements found for your search. Try a different keyword."),
}

CONTACT_EMAIL = os.environ.get('CONTACT_EMAIL', 'info@estg-tss.rw')
