"""Template blobs shared by every provider variant.

Each constant holds the exact text written into the generated Next.js app.
The only dynamic pieces are the API route and asset locations, spliced in by
plain concatenation when this module is imported, and ``Constants.ts`` which
is dumped from :data:`APP_DETAILS`.
"""

from __future__ import annotations

import json
from typing import Any

PAYMENTS_API = "/api/payments"
ASSETS_IMPORT = "../assets/verified"

APP_DETAILS: dict[str, Any] = {
    "stripe": {
        "plan_Id": "Your plan ID obtained from stripe",
        "mode": "payment",
        "portal_url": "https://billing.stripe.com/p/login/your-portal-link",
    },
    "app": {
        "title": "Your App Name",
        "description": "Your app description",
        "slogan": "Your app slogan",
        "demo": {
            "role": "Role",
            "name": "Your name",
            "demo_url": "https://www.youtube.com/embed/dskvbfdjvbj",
            "bio": "Passionate about simplifying app development for startups and developers.",
            "avatarUrl": "https://example.com/demo.jpg",
        },
    },
    "testimonials": [
        {
            "id": 1,
            "name": "Alice Johnson",
            "role": "Software Developer",
            "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Integer faucibus enim vitae nulla mollis",
        },
        {
            "id": 2,
            "name": "Bob Smith",
            "role": "Project Manager",
            "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Integer faucibus enim vitae nulla mollis.",
        },
        {
            "id": 3,
            "name": "Carol Davis",
            "role": "Startup Founder",
            "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Integer faucibus enim vitae nulla mollis.",
        },
        {
            "id": 4,
            "name": "Daryl Dixon",
            "role": "Startup Founder",
            "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Integer faucibus enim vitae nulla mollis.",
        },
    ],
    "plans": [
        {
            "name": "Basic Plan",
            "price": "$100",
            "priceId": "price_1PyqnJJ0UEKhTVBjTmxX4key",
            "description": "Perfect for small projects",
            "features": [
                {"name": f"Feature {number}", "included": number <= 4}
                for number in range(1, 8)
            ],
            "buttonText": "Get Started",
            "highlighted": False,
        },
        {
            "name": "Pro Plan",
            "price": "$150",
            "priceId": "price_1PzhWFJ0UEKhTVBjIDO9X2kj",
            "description": "Ideal for growing businesses",
            "features": [
                {"name": f"Feature {number}", "included": True}
                for number in range(1, 8)
            ],
            "buttonText": "Upgrade Now",
            "highlighted": True,
        },
    ],
    "socialLinks": [
        {"name": "Twitter", "url": "https://twitter.com/"},
        {"name": "GitHub", "url": "https://github.com/"},
        {"name": "LinkedIn", "url": "https://linkedin.com/"},
    ],
    "footerSections": [
        {"title": "Product", "links": ["Features", "Pricing", "Integrations", "FAQ"]},
        {"title": "Company", "links": ["About Us", "Careers", "Blog", "Contact"]},
        {"title": "Resources", "links": ["Documentation", "Tutorials", "API Reference", "Community"]},
        {"title": "Legal", "links": ["Privacy Policy", "Terms of Service", "Cookie Policy", "GDPR"]},
    ],
}


CONSTANTS = (
    "// Replace the placeholder values below with your own details.\n"
    "// stripe.priceId values come from your Stripe dashboard and demo_url must be an\n"
    "// embed link, e.g. //www.youtube.com/embed/<video-id>.\n"
    "export const details = "
    + json.dumps(APP_DETAILS, indent=2, ensure_ascii=False)
    + ";\n"
)


PAGE = """import Home from "./components/Home";
import Footer from "./components/Footer";

export default function Page() {
  return (
    <>
      <Home />
      <Footer />
    </>
  );
}
"""


LAYOUT = """import type { Metadata } from "next";
import localFont from "next/font/local";
import "./globals.css";
import { details } from "./constants/Constants";

const geistSans = localFont({
  src: "./fonts/GeistVF.woff",
  variable: "--font-geist-sans",
  weight: "100 900",
});
const geistMono = localFont({
  src: "./fonts/GeistMonoVF.woff",
  variable: "--font-geist-mono",
  weight: "100 900",
});

export const metadata: Metadata = {
  title: details.app.title,
  description: details.app.description,
};

export default function RootLayout({
  children,
}: Readonly<{
  children: React.ReactNode;
}>) {
  return (
    <html lang="en">
      <body
        className={`${geistSans.variable} ${geistMono.variable} antialiased`}
      >
        {children}
      </body>
    </html>
  );
}
"""


GLOBALS_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;

:root {
  --background: #ffffff;
  --foreground: #171717;
}

@media (prefers-color-scheme: dark) {
  :root {
    --background: #0a0a0a;
    --foreground: #ededed;
  }
}

body {
  color: var(--foreground);
  background: var(--background);
  font-family: Arial, Helvetica, sans-serif;
}

@layer utilities {
  .text-balance {
    text-wrap: balance;
  }
}

@keyframes scroll {
  0% {
    transform: translateX(0);
  }
  100% {
    transform: translateX(-50%);
  }
}

.testimonial-scroll {
  animation: scroll 30s linear infinite;
  width: 200%;
}

.testimonial-scroll:hover {
  animation-play-state: paused;
}
"""


VERIFIED_ICON = """import React from "react";

interface VerifiedProps {
  className?: string;
}

export const Verified: React.FC<VerifiedProps> = ({ className }) => {
  return (
    <svg
      className={`size-6 ${className ?? ""}`}
      xmlns="http://www.w3.org/2000/svg"
      fill="none"
      viewBox="0 0 24 24"
      strokeWidth={1.5}
      stroke="currentColor"
    >
      <path
        strokeLinecap="round"
        strokeLinejoin="round"
        d="M9 12.75 11.25 15 15 9.75M21 12a9 9 0 1 1-18 0 9 9 0 0 1 18 0Z"
      />
    </svg>
  );
};
"""


HOME = """import Availableservices from "./Availableservices";
import Navbar from "./Navbar";
import Pricing from "./Pricing";
import Testimonials from "./Testimonials";
import VideoDemo from "./VideoDemo";
import { details } from "../constants/Constants";

export default function Home() {
  return (
    <div className="min-h-screen w-[80%] mx-auto">
      <Navbar />
      <div className="text-center text-4xl font-bold py-10">
        {details.app.slogan}
      </div>
      <Testimonials />
      <VideoDemo />
      <Availableservices />
      <Pricing />
    </div>
  );
}
"""


FOOTER = """import React from "react";
import { details } from "../constants/Constants";

export default function Footer() {
  return (
    <footer className="bg-[#212021] text-white py-12">
      <div className="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
        <div className="grid grid-cols-2 md:grid-cols-4 gap-8">
          {details.footerSections.map((section, index) => (
            <div key={index}>
              <h3 className="text-lg font-semibold mb-4">{section.title}</h3>
              <ul className="space-y-2">
                {section.links.map((link, linkIndex) => (
                  <li key={linkIndex}>
                    <a
                      href="#"
                      className="hover:text-gray-300 transition-colors"
                    >
                      {link}
                    </a>
                  </li>
                ))}
              </ul>
            </div>
          ))}
        </div>
        <div className="mt-8 pt-8 border-t border-gray-700 flex flex-col md:flex-row justify-between items-center">
          <p className="text-sm text-gray-400">
            © {new Date().getFullYear()} {details.app.title}. All rights reserved.
          </p>
          <div className="flex space-x-6 mt-4 md:mt-0">
            {details.socialLinks.map((social, index) => (
              <a
                key={index}
                href={social.url}
                target="_blank"
                rel="noopener noreferrer"
                className="text-gray-400 hover:text-white transition-colors"
              >
                {social.name}
              </a>
            ))}
          </div>
        </div>
      </div>
    </footer>
  );
}
"""


TESTIMONIALS = """import React from "react";
import { details } from "../constants/Constants";

export default function Testimonials() {
  return (
    <div className="py-12 bg-black overflow-hidden rounded-xl my-12">
      <div className="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
        <h2 className="text-3xl font-extrabold text-white text-center mb-8">
          What Our Users Say
        </h2>
        <div className="relative">
          <div className="testimonial-scroll flex animate-scroll">
            {[...details.testimonials, ...details.testimonials].map(
              (testimonial, index) => (
                <div
                  key={`${testimonial.id}-${index}`}
                  className="bg-gradient-to-br from-neutral-900 via-neutral-800 to-neutral-700 rounded-lg shadow-md p-6 w-80 flex-shrink-0 mx-4 transition-all duration-300 hover:scale-105"
                >
                  <p className="mb-4 text-gray-300">"{testimonial.content}"</p>
                  <div className="flex items-center">
                    <div>
                      <p className="text-sm font-medium text-white">
                        {testimonial.name}
                      </p>
                      <p className="text-sm text-gray-400">
                        {testimonial.role}
                      </p>
                    </div>
                  </div>
                </div>
              )
            )}
          </div>
        </div>
      </div>
    </div>
  );
}
"""


VIDEO_DEMO = """import React from "react";
import { details } from "../constants/Constants";

export default function VideoDemo() {
  return (
    <div className="bg-gradient-to-b from-[#1a1a1a] to-black text-white my-12 py-12 rounded-xl">
      <div className="max-w-4xl mx-auto px-4 sm:px-6 lg:px-8">
        <div className="text-center mb-8">
          <h2 className="text-3xl font-bold mb-4">Watch Our Demo</h2>
          <p className="text-xl text-gray-300">
            See how {details.app.title} can revolutionize your workflow
          </p>
        </div>

        <div className="flex flex-col md:flex-row items-center justify-center mb-8">
          <img
            src={details.app.demo.avatarUrl}
            alt={details.app.demo.name}
            className="w-24 h-24 rounded-full mb-4 md:mb-0 md:mr-6"
          />
          <div>
            <h3 className="text-xl font-semibold">{details.app.demo.name}</h3>
            <p className="text-gray-300">{details.app.demo.role}</p>
            <p className="text-gray-400 mt-2">{details.app.demo.bio}</p>
          </div>
        </div>

        <div
          className="relative w-full max-w-2xl mx-auto"
          style={{ paddingBottom: "56.25%" }}
        >
          <iframe
            src={details.app.demo.demo_url}
            frameBorder="0"
            allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
            allowFullScreen
            className="absolute top-0 left-0 w-full h-full"
          ></iframe>
        </div>
      </div>
    </div>
  );
}
"""


AVAILABLE_SERVICES = """export default function Availableservices() {
  return (
    <div className="text-4xl text-white">Mention Your available services</div>
  );
}
"""


SUCCESS_PAGE = (
    """"use client";
import { useEffect, useState } from "react";
import { useRouter } from "next/navigation";

// After the payment completes, redirect to "/"
export default function SuccessPage() {
  const [status, setStatus] = useState("loading");
  const router = useRouter();

  useEffect(() => {
    const sessionId = new URLSearchParams(window.location.search).get(
      "session_id"
    );
    if (sessionId) {
      fetch(`"""
    + PAYMENTS_API
    + """?session_id=${sessionId}`)
        .then((response) => response.json())
        .then((data) => {
          if (data.status === "success") {
            setStatus("success");
            setTimeout(() => router.push("/"), 5000);
          } else {
            setStatus("error");
          }
        })
        .catch(() => setStatus("error"));
    }
  }, [router]);

  if (status === "loading") {
    return <div>Processing your payment...</div>;
  }

  if (status === "error") {
    return (
      <div>
        There was an error processing your payment. Please contact support.
      </div>
    );
  }

  return (
    <div>
      <h1>Payment Successful!</h1>
      <p>
        Thank you for your purchase. You will be redirected to the home page in
        5 seconds.
      </p>
    </div>
  );
}
"""
)


CANCEL_PAGE = """export default function Cancel() {
  return (
    <div>
      <div>Please Check Your internet Connection!</div>
      <div>If amount debited please contact support for more details</div>
    </div>
  );
}
"""


PAYMENTS_CLIENT = """import Stripe from "stripe";

export const stripe = new Stripe(process.env.STRIPE_SECRET_KEY!);
"""


PAYMENTS_ROUTE = """import { NextResponse } from "next/server";
import { stripe } from "@/lib/payments";

export async function POST(request: Request) {
  const { plan, userId } = await request.json();
  try {
    const session = await stripe.checkout.sessions.create({
      payment_method_types: ["card"],
      line_items: [
        {
          price: plan.priceId,
          quantity: 1,
        },
      ],
      // Use "subscription" together with a recurring price ID
      mode: "payment",
      success_url: `${request.headers.get(
        "origin"
      )}/success?session_id={CHECKOUT_SESSION_ID}`,
      cancel_url: `${request.headers.get("origin")}/cancel`,
      metadata: {
        userId: userId,
      },
    });
    return NextResponse.json({ sessionId: session.id });
  } catch (err) {
    console.error("Error creating checkout session:", err);
    return NextResponse.json(
      { error: "Error creating checkout session" },
      { status: 500 }
    );
  }
}

export async function GET(request: Request) {
  const { searchParams } = new URL(request.url);
  const sessionId = searchParams.get("session_id");

  if (!sessionId) {
    return NextResponse.json({ error: "Missing session_id" }, { status: 400 });
  }

  try {
    await stripe.checkout.sessions.retrieve(sessionId);
    return NextResponse.json({ status: "success" });
  } catch (err) {
    console.error("Error processing successful payment:", err);
    return NextResponse.json(
      { error: "Error processing successful payment" },
      { status: 500 }
    );
  }
}
"""


PAYMENTS_WEBHOOK_ROUTE = """import Stripe from "stripe";
import { stripe } from "@/lib/payments";
import { updateUserPurchaseStatus } from "@/lib/auth";
import { NextRequest, NextResponse } from "next/server";
import sendPurchaseConfirmationEmail from "@/lib/email";

export async function POST(request: NextRequest) {
  try {
    const rawBody = await request.text();
    const signature = request.headers.get("stripe-signature");

    // Verify the webhook signature before trusting the payload
    let event;
    try {
      event = stripe.webhooks.constructEvent(
        rawBody,
        signature!,
        process.env.STRIPE_WEBHOOK_SECRET!
      );
    } catch (error: any) {
      console.error(`Webhook signature verification failed: ${error.message}`);
      return NextResponse.json({ message: "Webhook Error" }, { status: 400 });
    }

    if (event.type === "checkout.session.completed") {
      const session: Stripe.Checkout.Session = event.data.object;
      const userId = session.metadata?.userId;

      await updateUserPurchaseStatus(userId!, true);

      await sendPurchaseConfirmationEmail(session);
    }
    // Always acknowledge the webhook
    return NextResponse.json({ message: "success" });
  } catch (error: any) {
    console.log(error.message);
    return NextResponse.json({ message: error.message }, { status: 500 });
  }
}
"""


EMAIL_CLIENT = """import formData from "form-data";
import Mailgun from "mailgun.js";

export default async function sendPurchaseConfirmationEmail(session: any) {
  const mailgun = new Mailgun(formData);
  const mg = mailgun.client({
    username: "api",
    key: process.env.NEXT_PUBLIC_MAILGUN_API_KEY || "key-yourkeyhere",
  });

  try {
    await mg.messages.create(process.env.NEXT_PUBLIC_MAILGUN_DOMAIN!, {
      from: process.env.MAILGUN_FROM_EMAIL,
      to: [`${session.customer_details.email}`],
      subject: "Email Subject",
      html: `<div>
              <h1>Your Startup Name</h1>
              <h2>Your purchase of ${session.payment_intent} is successful</h2>
            </div>`,
    });
  } catch (err: any) {
    console.error(err);
  }
}
"""


# Plan cards rendered by every variant's Pricing component, after its hooks.
PRICING_PLANS = """  return (
    <div className="bg-gradient-to-b from-[#1a1a1a] to-black py-16 rounded-xl my-12">
      <div className="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
        <div className="text-center">
          <h2 className="text-3xl font-extrabold text-white sm:text-4xl">
            Choose Your Plan
          </h2>
          <p className="mt-4 text-xl text-gray-300">
            Select the perfect plan for your project needs
          </p>
        </div>
        <div className="mt-16 flex justify-center space-x-8">
          {details.plans.map((plan, index) => (
            <div
              key={index}
              className={`flex flex-col rounded-lg shadow-lg overflow-hidden w-full max-w-md ${
                plan.highlighted
                  ? "border-2 border-blue-500 transform scale-105"
                  : "border border-gray-700"
              }`}
            >
              <div className="px-6 py-8 bg-[#212021] sm:p-10 sm:pb-6">
                <div className="flex justify-between items-baseline">
                  <h3 className="text-2xl font-semibold leading-6 text-white">
                    {plan.name}
                  </h3>
                  {plan.highlighted && (
                    <span className="px-3 py-1 text-sm font-semibold leading-5 tracking-wide uppercase rounded-full bg-blue-500 text-white">
                      Popular
                    </span>
                  )}
                </div>
                <div className="mt-4 flex items-baseline text-6xl font-extrabold text-white">
                  {plan.price}
                  <span className="ml-1 text-2xl font-medium text-gray-400">
                    /month
                  </span>
                </div>
                <p className="mt-5 text-lg text-gray-400">{plan.description}</p>
              </div>
              <div className="flex-1 flex flex-col justify-between px-6 pt-6 pb-8 bg-[#212021] space-y-6 sm:p-10 sm:pt-6">
                <ul className="space-y-4">
                  {plan.features.map((feature, featureIndex) => (
                    <li key={featureIndex} className="flex items-start">
                      <div className="flex-shrink-0">
                        <Verified
                          className={
                            feature.included ? "text-blue-500" : "text-gray-400"
                          }
                        />
                      </div>
                      <p
                        className={`ml-3 text-base ${
                          feature.included
                            ? "text-white"
                            : "text-gray-400 line-through"
                        }`}
                      >
                        {feature.name}
                      </p>
                    </li>
                  ))}
                </ul>
                <div className="rounded-md shadow">
                  <button
                    onClick={() => handleCheckout(plan)}
                    disabled={loading || hasPurchased}
                    className={`w-full flex items-center justify-center px-5 py-3 border border-transparent text-base font-medium rounded-md text-white ${
                      plan.highlighted
                        ? "bg-blue-500 hover:bg-blue-600"
                        : "bg-gray-700 hover:bg-gray-600"
                    } transition duration-150 ease-in-out ${
                      loading || hasPurchased
                        ? "opacity-50 cursor-not-allowed"
                        : ""
                    }`}
                  >
                    {loading
                      ? "Processing..."
                      : hasPurchased
                      ? "Already Purchased"
                      : plan.buttonText}
                  </button>
                </div>
              </div>
            </div>
          ))}
        </div>
      </div>
    </div>
  );
}
"""
