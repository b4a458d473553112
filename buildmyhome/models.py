"""
Database Models for the BuildMyHome Application

This module defines all database models using SQLAlchemy ORM.
Models include the catalog (Package, Material, Project), customer
Inquiry records and SavedPlan favorites.
"""

from buildmyhome.extensions import db
from datetime import datetime
from slugify import slugify


def _iso(value):
    return value.isoformat() if value else None


class Package(db.Model):
    """Prefabricated house package offered from the catalog."""

    __tablename__ = 'packages'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    name_hindi = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(250), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    description_hindi = db.Column(db.Text, nullable=False)

    size = db.Column(db.Integer, nullable=False)  # square feet
    bedrooms = db.Column(db.Integer, nullable=False)
    bathrooms = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Integer, nullable=False)  # rupees
    style = db.Column(db.String(40), nullable=False, index=True)

    popular = db.Column(db.Boolean, default=False)
    premium = db.Column(db.Boolean, default=False)
    budget = db.Column(db.Boolean, default=False)
    image_url = db.Column(db.String(600), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __init__(self, **kwargs):
        super(Package, self).__init__(**kwargs)
        if not self.slug and self.name:
            self.slug = self._generate_unique_slug(slugify(self.name))

    @staticmethod
    def _generate_unique_slug(base_slug):
        """Generate a unique slug by appending a numeric suffix if needed."""
        candidate = base_slug
        index = 1
        while Package.query.filter_by(slug=candidate).first() is not None:
            candidate = f"{base_slug}-{index}"
            index += 1
        return candidate

    @property
    def price_lakhs(self):
        return (self.price or 0) / 100000

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'nameHindi': self.name_hindi,
            'slug': self.slug,
            'description': self.description,
            'descriptionHindi': self.description_hindi,
            'size': self.size,
            'bedrooms': self.bedrooms,
            'bathrooms': self.bathrooms,
            'price': self.price,
            'style': self.style,
            'popular': bool(self.popular),
            'premium': bool(self.premium),
            'budget': bool(self.budget),
            'imageUrl': self.image_url,
        }

    def __repr__(self):
        return f'<Package {self.name}>'


class Material(db.Model):
    """Building material option, grouped by builder category."""

    __tablename__ = 'materials'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    name_hindi = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(40), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    description_hindi = db.Column(db.Text, nullable=False)
    premium = db.Column(db.Boolean, default=False)
    image_url = db.Column(db.String(600), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'nameHindi': self.name_hindi,
            'category': self.category,
            'description': self.description,
            'descriptionHindi': self.description_hindi,
            'premium': bool(self.premium),
            'imageUrl': self.image_url,
        }

    def __repr__(self):
        return f'<Material {self.category}:{self.name}>'


class Project(db.Model):
    """Completed (or ongoing) portfolio project."""

    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    title_hindi = db.Column(db.String(200), nullable=False)
    subtitle = db.Column(db.String(200), nullable=False)
    subtitle_hindi = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    description_hindi = db.Column(db.Text, nullable=False)
    completed = db.Column(db.Boolean, default=True)
    location = db.Column(db.String(120), nullable=False)
    image_url = db.Column(db.String(600), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'titleHindi': self.title_hindi,
            'subtitle': self.subtitle,
            'subtitleHindi': self.subtitle_hindi,
            'description': self.description,
            'descriptionHindi': self.description_hindi,
            'completed': bool(self.completed),
            'location': self.location,
            'imageUrl': self.image_url,
        }

    def __repr__(self):
        return f'<Project {self.title}>'


class Inquiry(db.Model):
    """Inbound lead from the contact page or the custom builder summary."""

    __tablename__ = 'inquiries'

    SOURCE_CONTACT = 'contact'
    SOURCE_BUILDER = 'builder'

    EMAIL_PENDING = 'pending'
    EMAIL_SENT = 'sent'
    EMAIL_FAILED = 'failed'

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(120), nullable=False)
    phone_number = db.Column(db.String(40), nullable=False)
    email = db.Column(db.String(200), index=True)
    location = db.Column(db.String(200))
    requirements = db.Column(db.Text)

    # Full HomeConfiguration snapshot, stored verbatim.
    custom_package = db.Column(db.JSON)

    source = db.Column(db.String(20), nullable=False, default=SOURCE_CONTACT)
    email_status = db.Column(db.String(20), nullable=False, default=EMAIL_PENDING)
    email_error = db.Column(db.Text)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'fullName': self.full_name,
            'phoneNumber': self.phone_number,
            'email': self.email,
            'location': self.location,
            'requirements': self.requirements,
            'customPackage': self.custom_package,
            'source': self.source,
            'emailStatus': self.email_status,
            'createdAt': _iso(self.created_at),
        }

    def __repr__(self):
        return f'<Inquiry {self.id} {self.full_name!r}>'


class SavedPlan(db.Model):
    """Server copy of a visitor's saved plan, keyed by a client session id."""

    __tablename__ = 'saved_plans'

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.String(64), nullable=False, index=True)
    package_id = db.Column(db.Integer, db.ForeignKey('packages.id', ondelete='SET NULL'))
    custom_package = db.Column(db.JSON)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    package = db.relationship('Package', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'sessionId': self.session_id,
            'packageId': self.package_id,
            'customPackage': self.custom_package,
            'createdAt': _iso(self.created_at),
        }

    def __repr__(self):
        return f'<SavedPlan {self.id} session={self.session_id}>'
