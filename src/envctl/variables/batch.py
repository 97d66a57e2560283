import structlog

from .exceptions import DeletionFailure
from .ids import split_ids
from .resource import get_var_resource

log = structlog.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class DeletionResult:
    def __init__(self, id, error=None):
        self.id = id
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        return f"DeletionResult(id={self.id!r}, error={self.error!r})"


class BatchResult:
    def __init__(self, resource, results=None):
        self.resource = resource
        self.results = results or []

    @property
    def failures(self):
        return [
            DeletionFailure(result.id, str(result.error))
            for result in self.results
            if not result.ok
        ]

    @property
    def exit_status(self):
        if any(not result.ok for result in self.results):
            return EXIT_FAILURE

        return EXIT_SUCCESS


def confirmation_message(ids):
    if len(ids) > 1:
        return (
            f"Are you sure you want to delete {len(ids)} "
            "environment variables?"
        )

    return f"Are you sure you want to delete environment variable {ids[0]}?"


class BatchDeleter:
    """Deletes a batch of variables, one API call per ID.

    Failed deletions are reported and collected; they never stop the
    remaining IDs from being attempted. Nothing is rolled back.
    """

    def __init__(self, client, confirm):
        self.client = client
        self.confirm = confirm

    async def run(
        self, ids, config=False, device=False, service=False, yes=False
    ):
        await self.client.check_logged_in()

        resource = get_var_resource(config, device, service)
        ids = split_ids(ids)

        _log = log.bind(resource=resource.value, count=len(ids))

        self.confirm(yes, confirmation_message(ids), None, True)

        result = BatchResult(resource)

        for id in ids:
            try:
                await self.client.delete(resource, int(id))
            except Exception as exc:
                failure = DeletionFailure(id, str(exc))
                print(failure)
                _log.debug("batch_delete_failed", id=id, error=str(exc))
                result.results.append(DeletionResult(id, exc))
                continue

            _log.debug("batch_delete_succeeded", id=id)
            result.results.append(DeletionResult(id))

        _log.info(
            "batch_delete_finished",
            failed=len(result.failures),
            exit_status=result.exit_status,
        )

        return result
