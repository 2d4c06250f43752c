# questions/roles.py
# Fixed role set. ROLE_ORDER is the iteration order used for initialization
# and for first-occurring-role tie breaks.

ROLE_ORDER = ("BE", "FE", "QA", "PM")

ROLES = {
    "BE": {
        "id": "BE",
        "label": "Backend Engineer",
        "explanation": (
            "Backend Engineers focus on server-side logic, databases, APIs, and system architecture. "
            "They work with data processing, security, performance optimization, and ensuring systems "
            "can scale and handle high loads efficiently."
        ),
    },
    "FE": {
        "id": "FE",
        "label": "Frontend Engineer",
        "explanation": (
            "Frontend Engineers create user interfaces and user experiences. They work with HTML, CSS, "
            "JavaScript, and frameworks to build responsive, accessible, and visually appealing "
            "applications that users interact with directly."
        ),
    },
    "QA": {
        "id": "QA",
        "label": "Quality Assurance Engineer",
        "explanation": (
            "QA Engineers ensure software quality through testing, bug identification, and validation. "
            "They create test plans, write automated tests, perform manual testing, and work to "
            "prevent defects from reaching production."
        ),
    },
    "PM": {
        "id": "PM",
        "label": "Product Manager",
        "explanation": (
            "Product Managers bridge business needs and technical implementation. They define product "
            "requirements, prioritize features, coordinate between stakeholders, and ensure products "
            "deliver value to users while meeting business objectives."
        ),
    },
}

COMPOUND_ROLE_SEPARATOR = " + "


def split_role_string(role_string):
    """Split a primary role value such as 'BE + FE' into its role ids."""
    if not role_string:
        return []
    return [part.strip() for part in role_string.split(COMPOUND_ROLE_SEPARATOR) if part.strip()]
