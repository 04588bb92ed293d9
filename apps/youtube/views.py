# apps/youtube/views.py

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import NotFound
from apps.core.permissions import api_login_required, carregar_projeto, exigir_edicao_conteudo
from apps.core.utils import carregar_json

from .forms import YoutubeVideoForm, YoutubeVideoCreateForm
from .serializers import serializar_video
from .storage import youtube_storage


def _criar_video(request, projeto, dados):
    dados['project_id'] = projeto.id
    dados['created_by_id'] = request.principal.id

    video = youtube_storage.create_video(dados)
    return JsonResponse(serializar_video(video), status=201)


@require_http_methods(['GET', 'POST'])
@api_login_required
def project_videos_view(request, project_id):
    if request.method == 'POST':
        projeto = carregar_projeto(request.principal, project_id, nivel='edicao')
        dados = YoutubeVideoForm(carregar_json(request)).dados_model()
        return _criar_video(request, projeto, dados)

    carregar_projeto(request.principal, project_id)
    videos = youtube_storage.get_videos(project_id)
    return JsonResponse([serializar_video(v) for v in videos], safe=False)


@require_http_methods(['POST'])
@api_login_required
def videos_view(request):
    """Criação com ``projectId`` no corpo"""
    dados = YoutubeVideoCreateForm(carregar_json(request)).dados_model()
    projeto = carregar_projeto(request.principal, dados.pop('project_id'), nivel='edicao')
    return _criar_video(request, projeto, dados)


@require_http_methods(['GET', 'PUT', 'DELETE'])
@api_login_required
def video_detail_view(request, video_id):
    video = youtube_storage.get_video(video_id)
    if video is None:
        raise NotFound("Video not found")

    if request.method == 'GET':
        carregar_projeto(request.principal, video.project_id)
        return JsonResponse(serializar_video(video))

    exigir_edicao_conteudo(request.principal, video.project)

    if request.method == 'DELETE':
        youtube_storage.delete_video(video.id)
        return JsonResponse({'message': 'Video deleted successfully'})

    dados = YoutubeVideoForm(carregar_json(request), partial=True).dados_model()
    video = youtube_storage.update_video(video.id, dados)
    return JsonResponse(serializar_video(video))
