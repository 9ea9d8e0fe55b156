"""The tables of the remote relational backend."""

from reportnavi.extensions import db
from reportnavi.models import (
    Activity,
    ActivityType,
    CATEGORY_MAX_LENGTH,
    Report,
    ReportFile,
    ReportStatus,
    TITLE_MAX_LENGTH,
    User,
    UserRole,
    USERNAME_MAX_LENGTH,
)


def _enum_values(enum):
    return [member.value for member in enum]


class UserRecord(db.Model):
    """Represents a row of the `users` table."""
    __tablename__ = 'users'
    __table_args__ = (
        db.CheckConstraint('points >= 0', name='points are non-negative'),
    )

    username = db.Column(db.String(USERNAME_MAX_LENGTH), primary_key=True)
    role = db.Column(db.Enum(UserRole, values_callable=_enum_values), nullable=False)
    points = db.Column(db.Integer, nullable=False, default=0)
    member_since = db.Column(db.String(40), nullable=False)
    profile_pic = db.Column(db.Text, nullable=True)
    password_hash = db.Column(db.String(256), nullable=False)

    @staticmethod
    def columns_of(user: User) -> dict:
        return dict(username=user.username,
                    role=user.role,
                    points=user.points,
                    member_since=user.member_since,
                    profile_pic=user.profile_pic,
                    password_hash=user.password_hash)

    @classmethod
    def from_entity(cls, user: User):
        return cls(**cls.columns_of(user))

    def to_entity(self) -> User:
        return User(username=self.username,
                    role=self.role,
                    points=self.points,
                    member_since=self.member_since,
                    profile_pic=self.profile_pic,
                    password_hash=self.password_hash)


class ReportRecord(db.Model):
    """Represents a row of the `reports` table. The attachments live in a JSON column."""
    __tablename__ = 'reports'

    id = db.Column(db.String(32), primary_key=True)
    user = db.Column(db.String(USERNAME_MAX_LENGTH), nullable=False, index=True)
    category = db.Column(db.String(CATEGORY_MAX_LENGTH), nullable=False)
    title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    location = db.Column(db.Text, nullable=False, default='')
    date = db.Column(db.String(40), nullable=False, index=True)
    status = db.Column(db.Enum(ReportStatus, values_callable=_enum_values),
                       nullable=False,
                       default=ReportStatus.pending)
    files = db.Column(db.JSON, nullable=False, default=list)
    thumbnail = db.Column(db.Text, nullable=False, default='')

    @staticmethod
    def dump_files(files):
        return [{'name': file.name, 'type': file.type, 'url': file.url} for file in files]

    @classmethod
    def from_entity(cls, report: Report):
        return cls(id=report.id,
                   user=report.user,
                   category=report.category,
                   title=report.title,
                   description=report.description,
                   location=report.location,
                   date=report.date,
                   status=report.status,
                   files=cls.dump_files(report.files),
                   thumbnail=report.thumbnail)

    def to_entity(self) -> Report:
        return Report(id=self.id,
                      user=self.user,
                      category=self.category,
                      title=self.title,
                      description=self.description,
                      location=self.location,
                      date=self.date,
                      status=self.status,
                      files=[ReportFile(**file) for file in self.files],
                      thumbnail=self.thumbnail)


class ActivityRecord(db.Model):
    """Represents a row of the `activities` table."""
    __tablename__ = 'activities'

    id = db.Column(db.String(64), primary_key=True)
    username = db.Column(db.String(USERNAME_MAX_LENGTH), nullable=False, index=True)
    type = db.Column(db.Enum(ActivityType, values_callable=_enum_values), nullable=False)
    target_title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    points_change = db.Column(db.Integer, nullable=False, default=0)
    date = db.Column(db.String(40), nullable=False, index=True)

    @classmethod
    def from_entity(cls, activity: Activity):
        return cls(id=activity.id,
                   username=activity.username,
                   type=activity.type,
                   target_title=activity.target_title,
                   points_change=activity.points_change,
                   date=activity.date)

    def to_entity(self) -> Activity:
        return Activity(id=self.id,
                        username=self.username,
                        type=self.type,
                        target_title=self.target_title,
                        points_change=self.points_change,
                        date=self.date)
