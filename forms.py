from flask_wtf import FlaskForm
from wtforms import SelectField
from wtforms.validators import Optional

from config import PAGE_SIZE_CHOICES, PAGER_DEFAULT_PAGE_SIZE


class PageSizeForm(FlaskForm):
    """Page size selector submitted by GET, so CSRF protection is off."""

    class Meta:
        csrf = False

    pageSize = SelectField(
        "Page size",
        choices=[(size, str(size)) for size in PAGE_SIZE_CHOICES],
        coerce=int,
        default=PAGER_DEFAULT_PAGE_SIZE,
        validators=[Optional()],
    )
