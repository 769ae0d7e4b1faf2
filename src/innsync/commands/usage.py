"""Usage text shown with command format errors."""

from __future__ import annotations

ADD_USAGE = (
    "add: Adds a person to the address book. "
    "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [m/MEMO] [r/REQUEST]... "
    "[bt/BOOKING_TAG]... [t/TAG]...\n"
    "Example: add n/John Doe p/6598765432 e/johnd@example.com "
    "a/311, Clementi Ave 2, #02-25 m/Prefers sea view r/Extra pillow "
    "bt/Beach House from/2024-10-01 to/2024-10-20 t/friend"
)
EDIT_USAGE = (
    "edit: Edits the details of the person identified by the index number "
    "used in the displayed person list. Existing values will be overwritten "
    "by the input values.\n"
    "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] "
    "[e/EMAIL] [a/ADDRESS] [m/MEMO] [r/REQUEST]... [bt/BOOKING_TAG]... [t/TAG]...\n"
    "Example: edit 1 p/6591234567 e/johndoe@example.com"
)
DELETE_USAGE = (
    "delete: Deletes the person identified by the index number used in the "
    "displayed person list.\n"
    "Parameters: INDEX (must be a positive integer)\n"
    "Example: delete 1"
)
FIND_USAGE = (
    "find: Finds persons by one or more fields simultaneously. \n"
    "Parameters: \n"
    "  By Name: n/KEYWORD [MORE_KEYWORDS]...\n"
    "  By Phone: p/KEYWORD [MORE_KEYWORDS]...\n"
    "  By Email: e/KEYWORD [MORE_KEYWORDS]...\n"
    "  By Address: a/KEYWORD [MORE_KEYWORDS]...\n"
    "  By Tag: t/KEYWORD [MORE_KEYWORDS]...\n"
    "  By Memo: m/KEYWORD [MORE_KEYWORDS]...\n"
    "  By BookingTag (Date): bd/DATE [MORE_DATES]...\n"
    "  By BookingTag (Property): bp/PROPERTY [MORE_KEYWORDS]...\n"
    "Examples: \n"
    "  find n/John\n"
    "  find bd/2024-10-15\n"
    "  find n/John p/91234567 t/friend m/breakfast"
)
TAG_USAGE = (
    "tag: Adds tags or booking tags to the person identified by the index "
    "number used in the displayed person list.\n"
    "Parameters: INDEX (must be a positive integer) [t/TAG]... [bt/BOOKING_TAG]...\n"
    "Example: tag 1 t/friend bt/Beach House from/2024-10-01 to/2024-10-20"
)
UNTAG_USAGE = (
    "untag: Removes one tag or one booking tag from the person identified by "
    "the index number used in the displayed person list.\n"
    "Parameters: INDEX (must be a positive integer) t/TAG | bt/BOOKING_TAG\n"
    "Example: untag 1 t/friend"
)
MEMO_USAGE = (
    "memo: Sets the memo of the person identified by the index number used in "
    "the displayed person list. An empty memo clears it.\n"
    "Parameters: INDEX (must be a positive integer) m/[MEMO]\n"
    "Example: memo 1 m/Likes sea view"
)
REQUEST_USAGE = (
    "req: Adds requests to the person identified by the index number used in "
    "the displayed person list.\n"
    "Parameters: INDEX (must be a positive integer) r/REQUEST [r/REQUEST]...\n"
    "Example: req 1 r/Extra pillow"
)
DELETE_REQUEST_USAGE = (
    "deletereq: Deletes a request from the person identified by the index "
    "number used in the displayed person list.\n"
    "Parameters: INDEX (must be a positive integer) r/REQUEST_INDEX\n"
    "Example: deletereq 1 r/2"
)
STAR_USAGE = (
    "star: Stars the person identified by the index number used in the "
    "displayed person list.\n"
    "Parameters: INDEX (must be a positive integer)\n"
    "Example: star 1"
)
UNSTAR_USAGE = (
    "unstar: Unstars the person identified by the index number used in the "
    "displayed person list.\n"
    "Parameters: INDEX (must be a positive integer)\n"
    "Example: unstar 1"
)
LIST_USAGE = "list: Lists all persons.\nExample: list"
CLEAR_USAGE = "clear: Clears all entries from the address book.\nExample: clear"
HELP_USAGE = "help: Shows program usage instructions.\nExample: help"
EXIT_USAGE = "exit: Exits the program.\nExample: exit"
