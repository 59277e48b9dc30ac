from dataclasses import dataclass

from flightdesk.log import log


@dataclass(frozen=True)
class CrewAssignment:
    crew_name: str
    flight_id: int

    def __str__(self) -> str:
        return f"Crew member {self.crew_name} assigned to Flight ID {self.flight_id}."


def assign_crew(crew_name: str, flight_id: int) -> CrewAssignment:
    """
    Assign a crew member to a flight. Assignments are announced, not stored, and the flight ID is not looked up; it
    only has to be positive.
    """
    if flight_id <= 0:
        raise ValueError("flight ID must be a positive number")
    assignment = CrewAssignment(crew_name, flight_id)
    log(str(assignment))
    return assignment
