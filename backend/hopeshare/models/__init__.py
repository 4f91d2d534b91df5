from .user import User
from .audit_log import AuditLog
from .site_setting import SiteSetting
from .banner import Banner
from .homepage_program import HomepageProgram
from .partner import PartnerOrganization
from .page_content import PageContent, HistoryItem, OrganizationItem, Facility
from .post import Post
from .recruitment_post import RecruitmentPost
from .program import Program
from .gallery_album import GalleryAlbum
from .video import Video
from .resource import Resource
from .inquiry import ContactMessage, DonationInquiry, VolunteerApplication
