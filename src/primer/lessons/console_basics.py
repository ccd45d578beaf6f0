"""
Lesson: console output utilities.

Logging several values at once, alert levels, objects and tables,
collapsed groups, styled text and timing a loop.
"""

from primer.console import Console
from primer.model import Lesson, Unit


def basic_logging(console: Console) -> None:
    amount = 100
    console.log(100)
    console.log("Hello from script.js")
    console.log("Values:", 20, "hello", True, amount)


def alert_levels(console: Console) -> None:
    console.log("Standard log")
    console.warn("Warning: API response slow")
    console.error("Error: Database connection failed")


def visualizing_data(console: Console) -> None:
    user = {"name": "Brad", "email": "example@gmail.com", "role": "Admin"}
    users = [
        {"name": "Brad", "email": "brad@gmail.com"},
        {"name": "John", "email": "john@gmail.com"},
        {"name": "Alice", "email": "alice@gmail.com"},
    ]
    console.log(user)
    console.table(users)


def grouping_logs(console: Console) -> None:
    # Starts collapsed.
    console.group_collapsed("Server Connection Steps")
    console.log("Step 1: Connecting...")
    console.log("Step 2: Authenticating...")
    console.log("Step 3: Connected!")
    console.group_end()


def custom_styling(console: Console) -> None:
    # CSS units take no space: "10px".
    styles = "padding: 10px; background-color: #222; color: #bada55; font-size: 16px"
    console.log("%cHello World!", styles)


def performance_timing(console: Console) -> None:
    console.time("Loop Timer")
    total = 0
    for i in range(1000):
        total += i
    console.time_end("Loop Timer")
    console.log(f"The sum of the numbers of 0 to 999 is: {total}")


LESSON = Lesson(
    name="console",
    title="Console Output",
    units=[
        Unit("basic-logging", "Basic Logging & Multiple Arguments", basic_logging),
        Unit("alert-levels", "Alert Levels", alert_levels),
        Unit("visualizing-data", "Visualizing Data", visualizing_data),
        Unit("grouping-logs", "Grouping Logs", grouping_logs),
        Unit("custom-styling", "Custom Styling", custom_styling),
        Unit("performance-timing", "Performance Timing", performance_timing),
    ],
)
