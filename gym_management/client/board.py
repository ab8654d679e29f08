import itertools
import logging

logger = logging.getLogger(__name__)


class WorkoutBoard:
    """
    A member's workout list as the client shows it.

    Local state only ever changes from server responses. Fetches are
    numbered; a response to an older fetch than the one already applied is
    ignored. Failed writes leave the list as it was.
    """

    def __init__(self, session):
        self.session = session
        self.workouts = []
        self.stats = None
        self._sequence = itertools.count(1)
        self._applied = 0

    def begin_fetch(self):
        return next(self._sequence)

    def apply_fetch(self, sequence, workouts):
        """Apply a fetched list; returns False when it arrived out of date."""
        if sequence <= self._applied:
            logger.debug("Dropping stale workout list #%s (have #%s)", sequence, self._applied)
            return False
        self._applied = sequence
        self.workouts = list(workouts)
        return True

    def refresh(self):
        sequence = self.begin_fetch()
        workouts = self.session.my_workouts()
        self.apply_fetch(sequence, workouts)
        self.stats = self.session.workout_stats()
        return self.workouts

    def merge(self, workout):
        """Replace the local copy of ``workout`` with the server's version."""
        for index, existing in enumerate(self.workouts):
            if existing["id"] == workout["id"]:
                self.workouts[index] = workout
                break
        else:
            self.workouts.insert(0, workout)
        return workout

    def toggle(self, workout_id):
        updated = self.session.toggle_completion(workout_id)
        self.merge(updated)
        self.stats = self.session.workout_stats()
        return updated

    @property
    def completed(self):
        return [w for w in self.workouts if w["isCompleted"]]
