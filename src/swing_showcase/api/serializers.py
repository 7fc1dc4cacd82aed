"""Domain to JSON conversions."""

from swing_showcase.domain.competitions import Competition
from swing_showcase.domain.models import UserRecord
from swing_showcase.domain.notifications import Notification
from swing_showcase.domain.prizes import Prize, PrizeStats
from swing_showcase.domain.uploads import UploadedImage
from swing_showcase.domain.votes import Vote, VoterCount, VoteStats
from swing_showcase.services.profiles import PublicProfile


def serialize_user(user: UserRecord) -> dict[str, object]:
    """Serialize a user for its owner. Credentials are never included."""
    return {
        **user.profile,
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "picture": user.picture,
        "isVerified": user.is_verified,
        "settings": user.settings,
        "createdAt": user.created_at.isoformat(),
        "updatedAt": user.updated_at.isoformat(),
    }


def serialize_public_profile(profile: PublicProfile) -> dict[str, object]:
    data = serialize_user(profile.user)
    data.pop("email")
    data.pop("settings")
    data["voteCount"] = profile.vote_count
    data["competitionCount"] = profile.competition_count
    return data


def serialize_competition(competition: Competition) -> dict[str, object]:
    return {
        "id": competition.id,
        "title": competition.title,
        "description": competition.description,
        "prize": competition.prize,
        "status": competition.status.value,
        "endDate": competition.end_date.isoformat(),
        "participants": list(competition.participants),
        "coverImage": competition.cover_image,
        "category": competition.category,
    }


def serialize_vote(vote: Vote) -> dict[str, object]:
    return {
        "id": vote.id,
        "modelId": vote.model_id,
        "voterId": vote.voter_id,
        "isPremium": vote.is_premium,
        "competitionId": vote.competition_id,
        "timestamp": vote.timestamp.isoformat(),
    }


def serialize_vote_stats(stats: VoteStats) -> dict[str, object]:
    return {
        "totalVotes": stats.total_votes,
        "uniqueVoters": stats.unique_voters,
        "topModels": [
            {
                "modelId": tally.model_id,
                "voteCount": tally.vote_count,
                "premiumCount": tally.premium_count,
            }
            for tally in stats.top_models
        ],
    }


def serialize_voter(voter: VoterCount) -> dict[str, object]:
    return {"voterId": voter.voter_id, "voteCount": voter.vote_count}


def serialize_notification(notification: Notification) -> dict[str, object]:
    return {
        "id": notification.id,
        "userId": notification.user_id,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat(),
    }


def serialize_prize(prize: Prize) -> dict[str, object]:
    return {
        "id": prize.id,
        "title": prize.title,
        "value": prize.value,
        "status": prize.status.value,
        "startDate": prize.start_date.isoformat(),
        "competitionId": prize.competition_id,
        "winnerId": prize.winner_id,
    }


def serialize_prize_stats(stats: PrizeStats) -> dict[str, object]:
    return {
        "totalPrizes": stats.total_prizes,
        "totalValue": stats.total_value,
        "completedPrizes": stats.completed_prizes,
    }


def serialize_image(image: UploadedImage) -> dict[str, object]:
    return {
        "id": image.id,
        "filename": image.filename,
        "originalName": image.original_name,
        "path": image.path,
        "size": image.size,
        "uploadedAt": image.uploaded_at.isoformat(),
    }
