from timetable.schema import DEADLINE, DEADLINE_END, FIXED, NO_START, Event


def fixed(id, name, day, start, end, depends_on=None):
    return Event(id, name, day, start, end, FIXED, depends_on)


def deadline(id, name, day, depends_on=None):
    return Event(id, name, day, NO_START, DEADLINE_END, DEADLINE, depends_on)
