"""Form component: holds field values, request status and the last good result."""

from typing import Callable

from ai_service import ContentGenerator
from models import (
    VALIDATION_ERROR,
    Error,
    FormState,
    GenerationResult,
    Idle,
    Loading,
    RequestStatus,
    Success,
)

URL_REQUIRED_MESSAGE = "Website URL is required"
GENERATION_ERROR_MESSAGE = "An error occurred while generating SEO content"

GeneratorFactory = Callable[[], ContentGenerator]


class FormValidationError(ValueError):
    """Submitted form values failed the presence check."""


def validate_form(form: FormState) -> None:
    if not form.url.strip():
        raise FormValidationError(URL_REQUIRED_MESSAGE)


class SeoGenerator:
    """One independent instance of the generator form.

    Status moves Idle -> Loading -> Success | Error. The last successful
    result is kept apart from the status so that it stays on screen while a
    later submission is loading or has failed.
    """

    def __init__(self, generator_factory: GeneratorFactory) -> None:
        self.generator_factory = generator_factory
        self.form = FormState()
        self.status: RequestStatus = Idle()
        self.output: GenerationResult | None = None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.status, Loading)

    @property
    def error(self) -> str:
        return self.status.message if isinstance(self.status, Error) else ""

    def _settled_status(self) -> RequestStatus:
        return Success(self.output) if self.output is not None else Idle()

    def _clear_error(self) -> None:
        if isinstance(self.status, Error):
            self.status = self._settled_status()

    async def submit(self, url: str, keywords: str = "", business_info: str = "") -> RequestStatus:
        """Validate the inputs and run one generation request.

        A submission arriving while another is in flight is ignored and the
        current status is returned unchanged.
        """
        if self.is_loading:
            print("SEO GENERATION: submission ignored, request already in flight.")
            return self.status

        self.form = FormState(url=url, keywords=keywords, business_info=business_info)
        self._clear_error()

        try:
            validate_form(self.form)
        except FormValidationError as e:
            self.status = Error(str(e), kind=VALIDATION_ERROR)
            return self.status

        self.status = Loading()
        try:
            generator = self.generator_factory()
            result = await generator.generate(
                self.form.url,
                self.form.keywords,
                self.form.business_info,
            )
        except Exception as e:
            print("SEO GENERATION ERROR:", repr(e))
            self.status = Error(GENERATION_ERROR_MESSAGE)
        else:
            self.output = result
            self.status = Success(result)
        finally:
            # Cancellation skips both branches above; Loading must not outlive the request.
            if self.is_loading:
                print("SEO GENERATION: request cancelled.")
                self.status = self._settled_status()
        return self.status
