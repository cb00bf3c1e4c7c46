"""Domain constants shared by deterministic logic."""

TIME_SLOT_LABELS = (
    "Morning (9:00-12:00)",
    "Afternoon (12:00-16:00)",
    "Evening (16:00-20:00)",
)
MEAL_SLOT_LABEL = "Lunch/Dinner (12:00-14:00)"

MIN_ACTIVITIES_PER_DAY = 2
MAX_ACTIVITIES_PER_DAY = 4
MAIN_ACTIVITIES_PER_DAY_CAP = 3

INTEREST_CATEGORIES = (
    "History",
    "Culture",
    "Nature",
    "Art",
    "Food",
    "Adventure",
    "Beach",
    "Shopping",
    "Recreation",
    "Wildlife",
)

DURATION_OPTIONS = (3, 5, 7, 10, 14)

# Upper bound on a single trip; longer requests are rejected before any day is built.
MAX_TRIP_DAYS = 365

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
