# apps/youtube/storage.py

import logging
from typing import Dict, List, Optional

from .models import YoutubeVideo

logger = logging.getLogger(__name__)


class YoutubeStorage:
    """Operações de CRUD dos vídeos"""

    def get_videos(self, project_id) -> List[YoutubeVideo]:
        return list(YoutubeVideo.objects.filter(project_id=project_id))

    def get_video(self, video_id) -> Optional[YoutubeVideo]:
        return YoutubeVideo.objects.select_related('project').filter(id=video_id).first()

    def create_video(self, dados: Dict) -> YoutubeVideo:
        video = YoutubeVideo.objects.create(**dados)
        logger.info(f"🎬 Vídeo cadastrado: {video.title} (projeto {video.project_id})")
        return video

    def update_video(self, video_id, dados: Dict) -> Optional[YoutubeVideo]:
        video = self.get_video(video_id)
        if video is None:
            return None

        for campo, valor in dados.items():
            setattr(video, campo, valor)
        video.save()
        return video

    def delete_video(self, video_id) -> bool:
        apagados, _ = YoutubeVideo.objects.filter(id=video_id).delete()
        return apagados > 0


# Instância global do access layer do YouTube
youtube_storage = YoutubeStorage()
