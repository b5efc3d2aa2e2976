# models/assignment.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Assignment:
    id: str
    date: str                 # YYYY-MM-DD
    leave_category_id: str
    created_at: str = ""      # ISO timestamp
    updated_at: str = ""

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date,
            'leaveTypeId': self.leave_category_id,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }

    @staticmethod
    def from_dict(data):
        return Assignment(
            id=data['id'],
            date=data['date'],
            leave_category_id=data['leaveTypeId'],
            created_at=data.get('createdAt', ''),
            updated_at=data.get('updatedAt', ''),
        )
