import os
import uuid
from werkzeug.security import safe_join
from flask import current_app

from hopeshare.domain.invariants.exceptions import InvariantViolation

ALLOWED_EXTENSIONS = {
    "image": {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'},
    "file": {'pdf', 'hwp', 'hwpx', 'doc', 'docx', 'xls', 'xlsx', 'ppt', 'pptx', 'zip', 'txt',
             'png', 'jpg', 'jpeg', 'gif'},
}
FOLDERS = {"image": "images", "file": "files"}


def allowed_file(filename, kind="file"):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS[kind]


def file_size(file):
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def save_file(file, kind="file"):
    """
    Stores an uploaded file and returns its public URL.

    The size limit is checked before anything is written; one attempt only.
    """
    if kind not in ALLOWED_EXTENSIONS:
        raise InvariantViolation(f"Unknown upload kind: {kind}", field="kind")

    if not file or not file.filename:
        raise InvariantViolation("A file is required", field="file")

    max_mb = current_app.config.get("MAX_UPLOAD_MB", 10)
    if file_size(file) > max_mb * 1024 * 1024:
        raise InvariantViolation(f"File must be {max_mb}MB or smaller", field="file")

    if not allowed_file(file.filename, kind):
        raise InvariantViolation("File type not allowed", field="file")

    # stored under a generated name; only the extension is kept
    ext = file.filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    relative_path = f"{FOLDERS[kind]}/{unique_filename}"
    upload_folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    target_dir = os.path.join(upload_folder, FOLDERS[kind])
    os.makedirs(target_dir, exist_ok=True)

    file.save(os.path.join(target_dir, unique_filename))
    current_app.logger.info("Stored upload %s (%s)", relative_path, kind)

    prefix = current_app.config.get("MEDIA_URL_PREFIX", "/media").rstrip("/")
    return f"{prefix}/{relative_path}"


def delete_file(file_url):
    """
    Deletes a stored upload given its public URL.
    URLs outside the media prefix are ignored.
    """
    if not file_url:
        return False

    prefix = current_app.config.get("MEDIA_URL_PREFIX", "/media").rstrip("/") + "/"
    if not file_url.startswith(prefix):
        return False

    upload_folder = os.path.abspath(current_app.config.get('UPLOAD_FOLDER', 'uploads'))
    file_path = safe_join(upload_folder, file_url[len(prefix):])
    if file_path is None:
        current_app.logger.warning("Refused to delete %s outside the upload folder", file_url)
        return False

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error("Failed to delete file %s: %s", file_path, e)
            return False
    return False
