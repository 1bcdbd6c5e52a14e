"""Django views for the wikilookup app."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from .forms import LookupForm
from .services import lookup as run_lookup


@require_GET
async def lookup(request: HttpRequest) -> HttpResponse:
    """Answer ``?q=<query>`` with the reply message of the lookup pipeline."""

    form = LookupForm(request.GET)
    if not form.is_valid():
        return JsonResponse({'errors': form.errors.get_json_data()}, status=400)

    query: str = form.cleaned_data['q']
    reply = await run_lookup(query)
    return JsonResponse({'query': query, 'reply': reply})
