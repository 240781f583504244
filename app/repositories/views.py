import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404
from django.shortcuts import redirect, render
from django.urls import NoReverseMatch, reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .forms import ReportForm
from .services import RepositoryService, SearchParams

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "javascript"


def capitalize(value):
    return value[:1].upper() + value[1:]


def _listing_url(language):
    try:
        return reverse("repositories:list", kwargs={"language": language or DEFAULT_LANGUAGE})
    except NoReverseMatch:
        return reverse("repositories:list", kwargs={"language": DEFAULT_LANGUAGE})


def repository_list(request, language):
    """Hacktoberfest repositories written in ``language``."""
    params = SearchParams.from_query(request.GET)
    user_id = request.user.pk if request.user.is_authenticated else None

    service = RepositoryService(default_token=settings.GITHUB_TOKEN)
    listing = service.get_repositories(language, params, user_id=user_id)

    if listing is None:
        raise Http404("No repositories found")

    language_name = capitalize(language)
    heading = f"{params.query} in {language_name}" if params.query else language_name

    return render(
        request,
        "repositories/repository_list.html",
        {
            "title": f"{language_name} Repositories",
            "language_name": language_name,
            "heading": heading,
            "listing": listing,
            "repositories": listing.repositories.items,
            "total_count": listing.repositories.total_count,
            "page": listing.page,
            "query": params.query,
            "sort": params.sort,
            "order": params.order,
            "start_stars": params.start_stars,
            "end_stars": params.end_stars,
            "can_report": request.user.is_authenticated,
        },
    )


@login_required
@require_POST
def report_create(request):
    """Report a repository so it is hidden from listings until resolved."""
    next_url = request.POST.get("next") or request.META.get("HTTP_REFERER")
    if not next_url or not url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        next_url = _listing_url(request.POST.get("language"))

    form = ReportForm(request.POST, reporter=request.user)
    if form.is_valid():
        report = form.save()
        logger.info(
            "User %s reported repository %s (%s)",
            request.user.get_username(), report.repo_full_name, report.repo_id,
        )
        messages.success(
            request,
            f'Thanks, "{report.repo_full_name or report.repo_id}" has been reported and hidden.'
        )
    else:
        for error in form.errors.get("__all__", []):
            messages.error(request, error)
        if any(field != "__all__" for field in form.errors):
            messages.error(request, "Invalid report.")

    return redirect(next_url)
