import logging

from .exceptions import BadRequest, ConcurrencyConflict, NotFound, ValidationFailed
from .forms import StarshipForm
from .models import Starship, TEXT_FIELDS

logger = logging.getLogger(__name__)


def _parse_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class StarshipGateway:
    """
    Create/read/update/delete for starships.

    Every call stands alone; the database is the only shared state.
    """

    def list(self):
        return list(Starship.objects.all())

    def get(self, pk):
        if pk is None:
            raise NotFound("No starship id given")
        try:
            return Starship.objects.get(pk=pk)
        except Starship.DoesNotExist:
            raise NotFound(f"Starship id={pk} not found")

    def exists(self, pk):
        return Starship.objects.filter(pk=pk).exists()

    def create(self, data):
        # ids are always assigned by the database; a posted "id" is not a form field
        form = StarshipForm(data)
        if not form.is_valid():
            raise ValidationFailed(form)

        starship = form.save()
        logger.info("Created starship id=%s", starship.pk)
        return starship

    def update(self, route_id, data):
        """
        Replace the text fields of starship ``route_id`` with ``data``.

        ``data["id"]`` must match ``route_id``. An optional ``data["version"]``
        is the token the caller read; without one the freshly loaded version
        is used. A token that is not an integer is rejected as BadRequest.
        """
        if _parse_int(data.get('id')) != route_id:
            raise BadRequest(f"Route id {route_id} does not match payload id {data.get('id')!r}")

        expected_version = None
        raw_version = data.get('version')
        if raw_version not in (None, ''):
            expected_version = _parse_int(raw_version)
            if expected_version is None:
                raise BadRequest(f"Unreadable version token {raw_version!r} for starship id={route_id}")

        form = StarshipForm(data)
        if not form.is_valid():
            raise ValidationFailed(form)

        existing = self.get(route_id)

        for field in TEXT_FIELDS:
            setattr(existing, field, form.cleaned_data[field])

        if expected_version is not None:
            existing.version = expected_version

        try:
            existing.save_versioned()
        except ConcurrencyConflict:
            if not self.exists(route_id):
                logger.info("Starship id=%s was deleted during update", route_id)
                raise NotFound(f"Starship id={route_id} was deleted")
            logger.error("Starship id=%s was changed concurrently", route_id)
            raise

        logger.info("Updated starship id=%s to version %s", existing.pk, existing.version)
        return existing

    def delete(self, pk):
        deleted, _ = Starship.objects.filter(pk=pk).delete()
        if deleted:
            logger.info("Deleted starship id=%s", pk)
        return deleted > 0
