"""
Seed Q&A for the assistant dataset.

Every string is a template: `{brand}` is substituted at generation time.
"""

from __future__ import annotations

from dataclasses import dataclass

_AUTHORS = "Wint War Shwe Yee, Naw Lal Yee Than Han, Chaw Su Han, Kaung Myat Thu, Kaung Kyaw Han"
_COURSE = "UiT SE ADBMS Course (CS-7313)"


@dataclass(frozen=True)
class TopicTemplate:
    tag: str
    questions: tuple[str, ...]
    answers: tuple[str, ...]


CANONICAL: tuple[tuple[str, str], ...] = (
    (
        "What is {brand}?",
        "{brand} is a subscription platform created for " + _COURSE + ". Project created by "
        + _AUTHORS + ". It provides dashboards for readers, creators, and admins with monthly "
        "membership, premium content gating, bookmarks, and a rich content editor.",
    ),
    (
        "Who created {brand}?",
        "{brand} was created for " + _COURSE + " by " + _AUTHORS + ".",
    ),
    (
        "Who built project {brand}?",
        "Project {brand} is a subscription platform created for " + _COURSE + " by "
        + _AUTHORS + ".",
    ),
    (
        "Tell me about project {brand}.",
        "{brand} is a subscription platform created for " + _COURSE + ". Project created by "
        + _AUTHORS + ", featuring monthly membership, premium gating, and creator tools.",
    ),
    (
        "How do I upgrade to Premium on {brand}?",
        "From the reader dashboard, click Upgrade to Premium. This starts checkout for the "
        "monthly membership. Once active, you can read all premium stories without the blur gate.",
    ),
    (
        "How do I manage billing on {brand}?",
        "Use the Manage Billing button in the Membership tab of your reader dashboard. It opens "
        "the billing portal to update payment methods or cancel your plan.",
    ),
    (
        "How does premium content gating work on {brand}?",
        "Premium stories show a preview and then display a blur gate with an Upgrade prompt. "
        "Premium members can view the full content immediately.",
    ),
    (
        "Where can I find my bookmarks on {brand}?",
        "Open your reader dashboard and go to the Bookmarks tab. All saved articles appear "
        "there with quick actions.",
    ),
    (
        "I'm a creator. Can I view other creators' content on {brand}?",
        "Yes. Creators have an active membership and can browse and read other creators' "
        "premium content like any member.",
    ),
    (
        "How do I write a new post on {brand}?",
        "From the Creator Dashboard, click Write New Post. You will be taken to the rich "
        "content editor where you can compose and publish.",
    ),
    (
        "Does {brand} support dark mode?",
        "Yes. The site uses a theme provider and adapts to your system preference. You can "
        "also toggle the theme from the dashboard header.",
    ),
    (
        "How can admins moderate content on {brand}?",
        "Admins can approve, remove, or review reported content from the Admin Dashboard "
        "under the Content Moderation tab.",
    ),
    (
        "How do I update my profile on {brand}?",
        "Click Profile in the reader dashboard header to open Profile Settings and edit your "
        "name, email, bio, and newsletter preferences.",
    ),
)

TOPICS: tuple[TopicTemplate, ...] = (
    TopicTemplate(
        tag="membership",
        questions=(
            "How much does {brand} Premium cost per month?",
            "Is there a free plan on {brand}?",
            "Can I cancel {brand} membership anytime?",
            "Does {brand} offer a student discount?",
            "How do I switch plans on {brand}?",
            "What happens if my {brand} payment fails?",
            "Is billing handled securely on {brand}?",
        ),
        answers=(
            "Premium is a monthly membership. Pricing is shown during checkout and managed "
            "via the billing portal.",
            "Yes. You can use {brand} on a free tier, but premium stories are gated until "
            "you upgrade.",
            "Yes. Use Manage Billing in your dashboard to cancel. Access continues until the "
            "end of the billing period.",
            "Discounts may be offered during promotions. Check the pricing page or billing "
            "portal for details.",
            "Use Manage Billing to change plans. Your new plan applies after confirmation in "
            "the portal.",
            "If a payment fails, the billing portal will guide you to update your method and "
            "retry.",
            "Yes. {brand} uses a PCI-compliant payment processor, and the customer portal "
            "handles secure updates.",
        ),
    ),
    TopicTemplate(
        tag="premium_gating",
        questions=(
            "Why is my article blurred on {brand}?",
            "How do I read the full premium story on {brand}?",
            "Can I preview premium articles on {brand}?",
            "Does {brand} remember my premium status across devices?",
        ),
        answers=(
            "Blur indicates premium content. Upgrade to Premium to remove the gate and read "
            "fully.",
            "Upgrade to Premium from your dashboard to unlock the full content instantly.",
            "Yes. Premium stories show a partial preview before the Upgrade prompt.",
            "Yes. Once signed in, your membership is recognized across devices.",
        ),
    ),
    TopicTemplate(
        tag="reader_dashboard",
        questions=(
            "Where is the Bookmarks tab in {brand}?",
            "How do I save an article to bookmarks on {brand}?",
            "How do I share an article from {brand}?",
            "What stats do I see as a reader on {brand}?",
        ),
        answers=(
            "Open your dashboard and select the Bookmarks tab to view saved articles.",
            "Click the bookmark icon on an article card or detail page to save it.",
            "Use the Share button on cards to share via your device's native share menu.",
            "Reader stats include articles read, reading time, bookmarks count, and "
            "subscriptions.",
        ),
    ),
    TopicTemplate(
        tag="creator_dashboard",
        questions=(
            "How do I become a creator on {brand}?",
            "Is there a creator activation fee on {brand}?",
            "Can creators schedule posts on {brand}?",
            "How do I edit or delete a post on {brand}?",
        ),
        answers=(
            "Click Become a Creator from your dashboard. Complete the activation to enable "
            "creator tools.",
            "Yes, there is a one-time activation fee shown during upgrade.",
            "Yes. Use the Schedule Post option from the Posts tab in your Creator Dashboard.",
            "Open the post in the Creator Dashboard and choose Edit or Delete from the post "
            "actions.",
        ),
    ),
    TopicTemplate(
        tag="admin",
        questions=(
            "How do admins review reported content on {brand}?",
            "Can admins ban a user on {brand}?",
            "Does {brand} provide platform analytics for admins?",
        ),
        answers=(
            "From the Admin Dashboard, open Content Moderation to approve, remove, or review "
            "reports.",
            "Yes. Admins can take actions like suspend or ban via the user management tools.",
            "Yes. The Admin Dashboard shows platform stats and revenue analytics.",
        ),
    ),
    TopicTemplate(
        tag="navigation_ui",
        questions=(
            "How do I change themes on {brand}?",
            "What is the sidebar navigation in {brand}?",
            "Where do I find settings in {brand}?",
        ),
        answers=(
            "Use the Theme Toggle in the header to switch between light and dark modes.",
            "The sidebar provides quick access to Discover, Library, Subscriptions, and "
            "role-specific tools.",
            "Open the dashboard header menu or the sidebar Settings item to access preferences.",
        ),
    ),
    TopicTemplate(
        tag="chatbot",
        questions=(
            "What can the {brand} chatbot help me with?",
            "How do I open the chatbot on {brand}?",
        ),
        answers=(
            "It assists with content creation tips, billing, membership, analytics, and "
            "navigation.",
            "Click Help in the header or the floating Chatbot button to open the assistant.",
        ),
    ),
    TopicTemplate(
        tag="tech",
        questions=(
            "What tech stack does {brand} use?",
            "Does {brand} support mobile devices?",
            "Why did I see a hydration warning on {brand}?",
        ),
        answers=(
            "{brand} uses Next.js with React, Tailwind, and a component system for the UI.",
            "Yes. The layout and sidebar are responsive and optimized for mobile.",
            "Hydration warnings can occur if client-only state differs from SSR. Refreshing "
            "and avoiding client-only reads during SSR resolves it.",
        ),
    ),
)
