# apps/youtube/serializers.py

from apps.core.utils import formatar_data


def serializar_video(video):
    return {
        'id': video.id,
        'projectId': video.project_id,
        'title': video.title,
        'description': video.description,
        'tags': video.tags or [],
        'thumbnailUrl': video.thumbnail_url,
        'videoUrl': video.video_url,
        'visibility': video.visibility,
        'category': video.category,
        'playlist': video.playlist,
        'scheduledPublishTime': formatar_data(video.scheduled_publish_time),
        'createdBy': video.created_by_id,
        'createdAt': formatar_data(video.created_at),
        'updatedAt': formatar_data(video.updated_at),
    }
