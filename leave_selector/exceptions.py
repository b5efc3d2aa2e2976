# exceptions.py


class CancelAction(Exception):
    """Raised from a prompt when the user types 'cancel'; unwinds to the main menu."""


class GoBackAction(Exception):
    """Raised from a prompt when the user types 'back'; unwinds one menu."""


class LeaveRuleError(ValueError):
    """A leave category definition that can never be valid (bad window, negative quota...)."""


class IneligibleAssignment(Exception):
    def __init__(self, date: str, category_id: str, reason: str):
        super().__init__(f"{date} / {category_id}: {reason}")
        self.date = date
        self.category_id = category_id
        self.reason = reason
