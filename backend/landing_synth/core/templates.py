"""Static markup and the palette-parameterized stylesheet

Everything here is fixed content: the composer decides which pieces are
emitted and in what order.
"""

from typing import NamedTuple, Tuple
from landing_synth.core.signals import Palette


COPYRIGHT_YEAR = "2024"

HERO_SIZE_MINIMAL = "48px"
HERO_SIZE_DEFAULT = "56px"


class HeroCopy(NamedTuple):
    headline: str
    body: str


SAAS_HERO = HeroCopy(
    "Transform Your Workflow",
    "Streamline your business operations with our powerful SaaS platform. "
    "Increase productivity and collaboration across your entire team.",
)
PRODUCT_HERO = HeroCopy(
    "The Future of Innovation",
    "Experience the next generation of technology designed to simplify your life "
    "and boost your productivity.",
)
AGENCY_HERO = HeroCopy(
    "Elevate Your Brand",
    "We create exceptional digital experiences that drive results and grow your business.",
)
GENERIC_HERO_HEADLINE = "Welcome to {name}"
GENERIC_HERO_BODY = (
    "Discover amazing solutions tailored to your needs. "
    "Join thousands of satisfied customers today."
)


class Feature(NamedTuple):
    icon: str
    title: str
    description: str


class PricingTier(NamedTuple):
    name: str
    price: str
    perks: Tuple[str, ...]
    featured: bool = False


class Testimonial(NamedTuple):
    quote: str
    author: str
    title: str


FEATURES = (
    Feature("⚡", "Lightning Fast",
            "Experience blazing-fast performance that keeps your workflow smooth and efficient."),
    Feature("🔒", "Secure &amp; Private",
            "Your data is protected with enterprise-grade security and encryption."),
    Feature("📊", "Advanced Analytics",
            "Get deep insights with powerful analytics and reporting tools."),
    Feature("🎨", "Customizable",
            "Tailor every aspect to match your brand and workflow perfectly."),
    Feature("🤝", "Team Collaboration",
            "Work together seamlessly with real-time collaboration features."),
    Feature("🚀", "Easy Integration",
            "Connect with your favorite tools and services effortlessly."),
)

PRICING_TIERS = (
    PricingTier("Starter", "$29", (
        "Up to 10 users",
        "Basic features",
        "Email support",
        "5GB storage",
    )),
    PricingTier("Professional", "$79", (
        "Up to 50 users",
        "All features",
        "Priority support",
        "50GB storage",
        "Advanced analytics",
    ), featured=True),
    PricingTier("Enterprise", "$199", (
        "Unlimited users",
        "All features",
        "24/7 support",
        "Unlimited storage",
        "Custom integrations",
        "Dedicated manager",
    )),
)

TESTIMONIALS = (
    Testimonial(
        "This product has completely transformed how we work. "
        "The team collaboration features are outstanding!",
        "Sarah Johnson", "CEO, TechCorp",
    ),
    Testimonial(
        "Outstanding support and incredible features. "
        "We've seen a 300% increase in productivity since switching.",
        "Michael Chen", "CTO, InnovateLabs",
    ),
    Testimonial(
        "The best investment we've made for our business. Simple, powerful, and reliable.",
        "Emily Rodriguez", "Founder, StartupHub",
    ),
)


def render_stylesheet(palette: Palette, dark: bool, minimal: bool) -> str:
    """Generate the <style> body. Dark mode swaps nav, card, band and footer surfaces."""
    primary, secondary, background, text = palette
    gradient = f"linear-gradient(135deg, {primary} 0%, {secondary} 100%)"

    nav_background = "rgba(17, 24, 39, 0.9)" if dark else "rgba(255, 255, 255, 0.95)"
    nav_border = "#374151" if dark else "#E5E7EB"
    card_surface = "#1F2937" if dark else "#FFFFFF"
    band_surface = "#1F2937" if dark else "#F9FAFB"
    pricing_card_surface = "#111827" if dark else "#FFFFFF"
    muted_text = "#D1D5DB" if dark else "#6B7280"
    faint_text = "#9CA3AF" if dark else "#6B7280"
    hero_size = HERO_SIZE_MINIMAL if minimal else HERO_SIZE_DEFAULT

    return f"""
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            line-height: 1.6;
            color: {text};
            background-color: {background};
        }}

        .container {{
            max-width: 1200px;
            margin: 0 auto;
            padding: 0 20px;
        }}

        /* Navigation */
        nav {{
            padding: 20px 0;
            background: {nav_background};
            backdrop-filter: blur(10px);
            position: sticky;
            top: 0;
            z-index: 1000;
            border-bottom: 1px solid {nav_border};
        }}

        nav .container {{
            display: flex;
            justify-content: space-between;
            align-items: center;
        }}

        .logo {{
            font-size: 24px;
            font-weight: bold;
            color: {primary};
        }}

        nav ul {{
            display: flex;
            list-style: none;
            gap: 30px;
        }}

        nav a {{
            text-decoration: none;
            color: {text};
            font-weight: 500;
            transition: color 0.3s;
        }}

        nav a:hover {{
            color: {primary};
        }}

        /* Hero Section */
        .hero {{
            padding: 100px 0;
            text-align: center;
            background: linear-gradient(135deg, {primary}15 0%, {secondary}15 100%);
        }}

        .hero h1 {{
            font-size: {hero_size};
            font-weight: 800;
            margin-bottom: 20px;
            background: {gradient};
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
            background-clip: text;
        }}

        .hero p {{
            font-size: 20px;
            margin-bottom: 40px;
            color: {muted_text};
            max-width: 600px;
            margin-left: auto;
            margin-right: auto;
        }}

        .cta-button {{
            display: inline-block;
            padding: 16px 40px;
            background: {gradient};
            color: white;
            text-decoration: none;
            border-radius: 8px;
            font-weight: 600;
            font-size: 18px;
            transition: transform 0.2s, box-shadow 0.2s;
            box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
        }}

        .cta-button:hover {{
            transform: translateY(-2px);
            box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.2);
        }}

        .secondary-button {{
            display: inline-block;
            padding: 16px 40px;
            background: transparent;
            color: {primary};
            text-decoration: none;
            border-radius: 8px;
            font-weight: 600;
            font-size: 18px;
            border: 2px solid {primary};
            margin-left: 15px;
            transition: all 0.2s;
        }}

        .secondary-button:hover {{
            background: {primary};
            color: white;
        }}

        /* Features Section */
        .features {{
            padding: 80px 0;
        }}

        .section-title {{
            text-align: center;
            font-size: 42px;
            font-weight: 700;
            margin-bottom: 60px;
        }}

        .features-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 40px;
        }}

        .feature-card {{
            padding: 30px;
            border-radius: 12px;
            background: {card_surface};
            box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
            transition: transform 0.2s;
        }}

        .feature-card:hover {{
            transform: translateY(-5px);
            box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.2);
        }}

        .feature-icon {{
            width: 50px;
            height: 50px;
            background: {gradient};
            border-radius: 10px;
            display: flex;
            align-items: center;
            justify-content: center;
            color: white;
            font-size: 24px;
            margin-bottom: 20px;
        }}

        .feature-card h3 {{
            font-size: 24px;
            margin-bottom: 15px;
        }}

        .feature-card p {{
            color: {muted_text};
            line-height: 1.7;
        }}

        /* Pricing Section */
        .pricing {{
            padding: 80px 0;
            background: {band_surface};
        }}

        .pricing-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
            gap: 30px;
            max-width: 1000px;
            margin: 0 auto;
        }}

        .pricing-card {{
            padding: 40px 30px;
            border-radius: 12px;
            background: {pricing_card_surface};
            box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
            text-align: center;
        }}

        .pricing-card.featured {{
            border: 3px solid {primary};
            transform: scale(1.05);
        }}

        .pricing-card h3 {{
            font-size: 24px;
            margin-bottom: 15px;
        }}

        .price {{
            font-size: 48px;
            font-weight: 700;
            color: {primary};
            margin: 20px 0;
        }}

        .price span {{
            font-size: 20px;
            color: {faint_text};
        }}

        .pricing-features {{
            list-style: none;
            margin: 30px 0;
            text-align: left;
        }}

        .pricing-features li {{
            padding: 10px 0;
            color: {muted_text};
        }}

        .pricing-features li:before {{
            content: "✓ ";
            color: {primary};
            font-weight: bold;
            margin-right: 10px;
        }}

        /* Testimonials Section */
        .testimonials {{
            padding: 80px 0;
        }}

        .testimonials-grid {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 30px;
        }}

        .testimonial-card {{
            padding: 30px;
            border-radius: 12px;
            background: {card_surface};
            box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);
        }}

        .testimonial-text {{
            font-style: italic;
            margin-bottom: 20px;
            color: {muted_text};
        }}

        .testimonial-author {{
            display: flex;
            align-items: center;
            gap: 15px;
        }}

        .author-avatar {{
            width: 50px;
            height: 50px;
            border-radius: 50%;
            background: {gradient};
        }}

        .author-name {{
            font-weight: 600;
        }}

        .author-title {{
            font-size: 14px;
            color: {faint_text};
        }}

        /* CTA Section */
        .cta-section {{
            padding: 100px 0;
            text-align: center;
            background: {gradient};
            color: white;
        }}

        .cta-section h2 {{
            font-size: 42px;
            margin-bottom: 20px;
        }}

        .cta-section p {{
            font-size: 20px;
            margin-bottom: 40px;
            opacity: 0.9;
        }}

        .cta-section .cta-button {{
            background: white;
            color: {primary};
        }}

        /* Footer */
        footer {{
            padding: 40px 0;
            text-align: center;
            background: {band_surface};
            color: {faint_text};
        }}

        @media (max-width: 768px) {{
            .hero h1 {{
                font-size: 36px;
            }}

            .secondary-button {{
                display: block;
                margin: 15px auto 0;
            }}

            nav ul {{
                gap: 15px;
                font-size: 14px;
            }}
        }}
    """


def render_head(title: str, stylesheet: str) -> str:
    """Generate the <head> section with the inline stylesheet"""
    return f"""<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{stylesheet}</style>
</head>"""


def render_nav(logo: str, links: Tuple[Tuple[str, str], ...]) -> str:
    """Generate the navigation bar; ``links`` are (anchor id, label) pairs"""
    items = "\n".join(
        f'                <li><a href="#{anchor}">{label}</a></li>' for anchor, label in links
    )
    return f"""    <nav>
        <div class="container">
            <div class="logo">{logo}</div>
            <ul>
{items}
            </ul>
        </div>
    </nav>"""


def render_hero(headline: str, body: str) -> str:
    return f"""    <section class="hero">
        <div class="container">
            <h1>{headline}</h1>
            <p>{body}</p>
            <a href="#" class="cta-button">Get Started Free</a>
            <a href="#" class="secondary-button">Learn More</a>
        </div>
    </section>"""


def render_features() -> str:
    cards = "\n".join(
        f"""                <div class="feature-card">
                    <div class="feature-icon">{feature.icon}</div>
                    <h3>{feature.title}</h3>
                    <p>{feature.description}</p>
                </div>"""
        for feature in FEATURES
    )
    return f"""    <section class="features" id="features">
        <div class="container">
            <h2 class="section-title">Powerful Features</h2>
            <div class="features-grid">
{cards}
            </div>
        </div>
    </section>"""


def _render_pricing_card(tier: PricingTier) -> str:
    card_class = "pricing-card featured" if tier.featured else "pricing-card"
    perks = "\n".join(f"                        <li>{perk}</li>" for perk in tier.perks)
    return f"""                <div class="{card_class}">
                    <h3>{tier.name}</h3>
                    <div class="price">{tier.price}<span>/mo</span></div>
                    <ul class="pricing-features">
{perks}
                    </ul>
                    <a href="#" class="cta-button">Choose Plan</a>
                </div>"""


def render_pricing() -> str:
    cards = "\n".join(_render_pricing_card(tier) for tier in PRICING_TIERS)
    return f"""    <section class="pricing" id="pricing">
        <div class="container">
            <h2 class="section-title">Simple, Transparent Pricing</h2>
            <div class="pricing-grid">
{cards}
            </div>
        </div>
    </section>"""


def render_testimonials() -> str:
    cards = "\n".join(
        f"""                <div class="testimonial-card">
                    <p class="testimonial-text">"{testimonial.quote}"</p>
                    <div class="testimonial-author">
                        <div class="author-avatar"></div>
                        <div>
                            <div class="author-name">{testimonial.author}</div>
                            <div class="author-title">{testimonial.title}</div>
                        </div>
                    </div>
                </div>"""
        for testimonial in TESTIMONIALS
    )
    return f"""    <section class="testimonials" id="testimonials">
        <div class="container">
            <h2 class="section-title">What Our Customers Say</h2>
            <div class="testimonials-grid">
{cards}
            </div>
        </div>
    </section>"""


def render_cta() -> str:
    return """    <section class="cta-section" id="contact">
        <div class="container">
            <h2>Ready to Get Started?</h2>
            <p>Join thousands of satisfied customers and transform your business today.</p>
            <a href="#" class="cta-button">Start Your Free Trial</a>
        </div>
    </section>"""


def render_footer(name: str) -> str:
    return f"""    <footer>
        <div class="container">
            <p>&copy; {COPYRIGHT_YEAR} {name}. All rights reserved.</p>
        </div>
    </footer>"""


def render_document(head: str, regions: Tuple[str, ...]) -> str:
    """Wrap head and body regions into the single <html> document"""
    body = "\n\n".join(regions)
    return f"""<!DOCTYPE html>
<html lang="en">
{head}
<body>
{body}
</body>
</html>
"""
