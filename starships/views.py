import logging

from django.contrib import messages
from django.http import Http404, HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from .exceptions import BadRequest, NotFound, ValidationFailed
from .forms import StarshipForm
from .gateway import StarshipGateway

logger = logging.getLogger(__name__)

gateway = StarshipGateway()


def _get_or_404(pk):
    try:
        return gateway.get(pk)
    except NotFound as e:
        raise Http404(str(e))


@require_http_methods(['GET'])
def starship_list(request):
    """
    GET /records
    """
    return render(request, 'starships/index.html', {'starships': gateway.list()})


@require_http_methods(['GET'])
def starship_detail(request, pk=None):
    """
    GET /records/:id
    """
    return render(request, 'starships/details.html', {'starship': _get_or_404(pk)})


@require_http_methods(['GET', 'POST'])
def starship_create(request):
    """
    GET, POST /records/create
    """
    if request.method == 'GET':
        return render(request, 'starships/create.html', {'form': StarshipForm()})

    try:
        starship = gateway.create(request.POST)
    except ValidationFailed as e:
        return render(request, 'starships/create.html', {'form': e.form})

    messages.success(request, f'Starship "{starship.name}" created.')
    return redirect('starship_list')


@require_http_methods(['GET', 'POST'])
def starship_edit(request, pk):
    """
    GET, POST /records/:id/edit
    """
    if request.method == 'GET':
        starship = _get_or_404(pk)
        return render(request, 'starships/edit.html', {
            'form': StarshipForm(instance=starship),
            'starship_id': starship.pk,
            'version': starship.version,
        })

    try:
        starship = gateway.update(pk, request.POST)
    except BadRequest as e:
        logger.warning("Rejected edit of starship id=%s: %s", pk, e)
        return HttpResponseBadRequest("Starship id or version token mismatch")
    except ValidationFailed as e:
        return render(request, 'starships/edit.html', {
            'form': e.form,
            'starship_id': pk,
            'version': request.POST.get('version'),
        })
    except NotFound as e:
        raise Http404(str(e))

    messages.success(request, f'Starship "{starship.name}" updated.')
    return redirect('starship_list')


@require_http_methods(['GET', 'POST'])
def starship_delete(request, pk):
    """
    GET, POST /records/:id/delete
    """
    if request.method == 'GET':
        return render(request, 'starships/delete.html', {'starship': _get_or_404(pk)})

    if gateway.delete(pk):
        messages.success(request, 'Starship deleted.')
    return redirect('starship_list')
