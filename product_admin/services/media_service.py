import logging
import re
from urllib.parse import unquote, urlparse

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from werkzeug.datastructures import FileStorage

from product_admin.utils.exceptions import UploadFailure

logger = logging.getLogger(__name__)

HOSTED_DOMAIN = "cloudinary.com"
UPLOAD_TRANSFORMATION = {"width": 800, "height": 800, "crop": "limit"}

_VERSION_SEGMENT = re.compile(r"^v\d+$")
_TRANSFORMATION_SEGMENT = re.compile(r"^[a-z]{1,3}_")


class MediaUploader:
    """Cloudinary client used to host product images.

    Images are referenced only by the ``secure_url`` Cloudinary returns. The
    public id needed for deletion is parsed back out of that URL.
    """

    def __init__(self, app=None):
        self.folder = "product-management"
        self.timeout = 30
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        # without explicit keys the SDK keeps what it read from CLOUDINARY_URL
        if app.config.get("CLOUDINARY_CLOUD_NAME"):
            cloudinary.config(
                cloud_name=app.config["CLOUDINARY_CLOUD_NAME"],
                api_key=app.config.get("CLOUDINARY_API_KEY"),
                api_secret=app.config.get("CLOUDINARY_API_SECRET"),
                secure=True,
            )

        self.folder = app.config.get("MEDIA_FOLDER", self.folder)
        self.timeout = app.config.get("MEDIA_UPLOAD_TIMEOUT", self.timeout)

        if self.is_configured:
            logger.info(f"Cloudinary configured for cloud '{self.cloud_name}'")
        else:
            logger.warning(
                "Cloudinary credentials missing: set CLOUDINARY_URL or "
                "CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET"
            )

        app.extensions["media_uploader"] = self

    @property
    def cloud_name(self):
        return getattr(cloudinary.config(), "cloud_name", None)

    @property
    def is_configured(self) -> bool:
        settings = cloudinary.config()
        return bool(
            getattr(settings, "cloud_name", None)
            and getattr(settings, "api_key", None)
            and getattr(settings, "api_secret", None)
        )

    def upload(self, source) -> str:
        """Upload a ``FileStorage`` or a remote image URL, return its permanent URL"""
        if isinstance(source, FileStorage):
            label = source.filename or "upload"
            file = source.stream
        else:
            label = source
            file = source

        if not self.is_configured:
            raise UploadFailure(label, "Media host credentials are not configured")

        try:
            result = cloudinary.uploader.upload(
                file,
                folder=self.folder,
                resource_type="image",
                transformation=[UPLOAD_TRANSFORMATION],
                timeout=self.timeout,
            )
        except cloudinary.exceptions.AuthorizationRequired as e:
            raise UploadFailure(
                label, "Cloudinary authentication failed, check CLOUDINARY_URL or credentials"
            ) from e
        except cloudinary.exceptions.Error as e:
            raise UploadFailure(label, str(e)) from e

        secure_url = result.get("secure_url")
        if not secure_url:
            raise UploadFailure(label, "Media host returned no URL")

        logger.info(f"Uploaded {label} to {secure_url}")
        return secure_url

    def destroy(self, url: str):
        """Delete a hosted image by its reference URL"""
        public_id = self.public_id_from_url(url)
        if not public_id:
            raise UploadFailure(url, "Not a media host reference")
        if not self.is_configured:
            raise UploadFailure(url, "Media host credentials are not configured")

        try:
            result = cloudinary.uploader.destroy(public_id, timeout=self.timeout)
        except cloudinary.exceptions.Error as e:
            raise UploadFailure(url, str(e)) from e

        if result.get("result") != "ok":
            raise UploadFailure(url, f"Media host answered '{result.get('result')}'")

        logger.info(f"Deleted media {public_id}")

    def is_hosted(self, url) -> bool:
        """True when ``url`` points at an image stored on our media host"""
        if not isinstance(url, str) or not url.strip():
            return False

        parsed = urlparse(url.strip())
        if parsed.scheme not in ("http", "https"):
            return False

        host = (parsed.hostname or "").lower()
        if host != HOSTED_DOMAIN and not host.endswith("." + HOSTED_DOMAIN):
            return False

        cloud_name = self.cloud_name
        if cloud_name:
            return parsed.path.startswith(f"/{cloud_name}/")
        return True

    @staticmethod
    def public_id_from_url(url: str):
        """Extract the public id (folder/name without extension) from a delivery URL"""
        path = urlparse(url).path
        if "/upload/" not in path:
            return None

        segments = [s for s in path.split("/upload/", 1)[1].split("/") if s]
        version = next(
            (i for i, segment in enumerate(segments) if _VERSION_SEGMENT.match(segment)),
            None,
        )
        if version is not None:
            segments = segments[version + 1:]
        else:
            # no version: leading transformation segments precede the public id
            while len(segments) > 1 and (
                "," in segments[0] or _TRANSFORMATION_SEGMENT.match(segments[0])
            ):
                segments = segments[1:]

        if not segments:
            return None

        segments[-1] = segments[-1].rsplit(".", 1)[0]
        return unquote("/".join(segments))
