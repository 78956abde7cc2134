"""Template blobs for the Supabase variant.

Purchases are tracked in a ``users`` table with ``id uuid primary key`` and
``has_purchased boolean`` columns; the webhook updates it with the service
role key so row level security can stay enabled for browser clients.
"""

from __future__ import annotations

from .common import ASSETS_IMPORT, PAYMENTS_API, PRICING_PLANS

BROWSER_CLIENT = """import { createBrowserClient } from "@supabase/ssr";

export function createClient() {
  return createBrowserClient(
    process.env.NEXT_PUBLIC_SUPABASE_URL!,
    process.env.NEXT_PUBLIC_SUPABASE_ANON_KEY!
  );
}
"""


MIDDLEWARE = """import { createServerClient } from "@supabase/ssr";
import { NextResponse, type NextRequest } from "next/server";

// Call updateSession from a root middleware.ts to keep auth cookies fresh
export async function updateSession(request: NextRequest) {
  let supabaseResponse = NextResponse.next({ request });

  const supabase = createServerClient(
    process.env.NEXT_PUBLIC_SUPABASE_URL!,
    process.env.NEXT_PUBLIC_SUPABASE_ANON_KEY!,
    {
      cookies: {
        getAll() {
          return request.cookies.getAll();
        },
        setAll(cookiesToSet) {
          cookiesToSet.forEach(({ name, value }) =>
            request.cookies.set(name, value)
          );
          supabaseResponse = NextResponse.next({ request });
          cookiesToSet.forEach(({ name, value, options }) =>
            supabaseResponse.cookies.set(name, value, options)
          );
        },
      },
    }
  );

  await supabase.auth.getUser();

  return supabaseResponse;
}
"""


DATABASE = """import { createClient as createSupabaseClient } from "@supabase/supabase-js";
import { createClient } from "@/utils/supabase/client";

export const supabase = createClient();

// Server-only client; never import this from a client component
export function createAdminClient() {
  return createSupabaseClient(
    process.env.NEXT_PUBLIC_SUPABASE_URL!,
    process.env.SUPABASE_SERVICE_ROLE_KEY!,
    { auth: { persistSession: false } }
  );
}
"""


AUTH = """import { supabase, createAdminClient } from "./database";

// Enable Google as an auth provider in the Supabase dashboard
export async function signInWithGoogle() {
  const { data, error } = await supabase.auth.signInWithOAuth({
    provider: "google",
    options: { redirectTo: window.location.origin },
  });
  if (error) {
    console.error("Error during sign-in:", error);
    return null;
  }
  return data;
}

export async function signOut(): Promise<void> {
  await supabase.auth.signOut();
}

export async function updateUserPurchaseStatus(
  uid: string,
  hasPurchased: boolean
): Promise<void> {
  const admin = createAdminClient();
  const { error } = await admin
    .from("users")
    .upsert({ id: uid, has_purchased: hasPurchased });
  if (error) {
    throw error;
  }
}
"""


PORTAL_BUTTON = """"use client";
import { details } from "../constants/Constants";

// Sends customers to the Stripe customer portal configured in details.stripe
export default function PortalButton() {
  return (
    <a
      href={details.stripe.portal_url}
      className="bg-gray-700 hover:bg-gray-600 text-white px-4 py-2 rounded-md text-sm transition duration-300 ease-in-out"
    >
      Manage Billing
    </a>
  );
}
"""


NAVBAR = """"use client";
import { useState, useEffect } from "react";
import type { User } from "@supabase/supabase-js";
import { supabase } from "@/lib/database";
import { signOut, signInWithGoogle } from "@/lib/auth";
import Link from "next/link";
import PortalButton from "./PortalButton";
import { details } from "../constants/Constants";

export default function Navbar() {
  const [user, setUser] = useState<User | null>(null);

  useEffect(() => {
    supabase.auth.getUser().then(({ data }) => setUser(data.user));
    const { data } = supabase.auth.onAuthStateChange((_event, session) => {
      setUser(session?.user ?? null);
    });
    return () => data.subscription.unsubscribe();
  }, []);

  const handleSignIn = async () => {
    try {
      await signInWithGoogle();
    } catch (error) {
      console.error("Error signing in", error);
    }
  };

  const handleSignOut = async () => {
    try {
      await signOut();
    } catch (error) {
      console.error("Error signing out", error);
    }
  };

  return (
    <nav className="text-white p-4">
      <div className="max-w-7xl mx-auto flex justify-between items-center">
        <Link href="/" className="text-2xl font-bold">
          {details.app.title}
        </Link>
        <div className="flex items-center space-x-4">
          {user ? (
            <>
              <span className="text-sm">
                Welcome, {user.user_metadata?.full_name || user.email}
              </span>
              <PortalButton />
              <button
                onClick={handleSignOut}
                className="bg-red-500 hover:bg-red-600 text-white px-4 py-2 rounded-md text-sm transition duration-300 ease-in-out"
              >
                Sign Out
              </button>
            </>
          ) : (
            <button
              onClick={handleSignIn}
              className="bg-blue-500 hover:bg-blue-600 text-white px-4 py-2 rounded-md text-sm transition duration-300 ease-in-out"
            >
              Sign In with Google
            </button>
          )}
        </div>
      </div>
    </nav>
  );
}
"""


PRICING = (
    """"use client";
import { supabase } from "@/lib/database";
import { useState, useEffect } from "react";
import type { User } from "@supabase/supabase-js";
import { signInWithGoogle } from "@/lib/auth";
import { Verified } from \""""
    + ASSETS_IMPORT
    + """";
import { loadStripe } from "@stripe/stripe-js";
import { details } from "../constants/Constants";

export default function Pricing() {
  const [loading, setLoading] = useState(false);
  const [user, setUser] = useState<User | null>(null);
  const [hasPurchased, setHasPurchased] = useState(false);

  useEffect(() => {
    const loadPurchase = async (currentUser: User | null) => {
      setUser(currentUser);
      if (!currentUser) {
        setHasPurchased(false);
        return;
      }
      const { data } = await supabase
        .from("users")
        .select("has_purchased")
        .eq("id", currentUser.id)
        .maybeSingle();
      setHasPurchased(Boolean(data?.has_purchased));
    };

    supabase.auth.getUser().then(({ data }) => loadPurchase(data.user));
    const { data } = supabase.auth.onAuthStateChange((_event, session) => {
      loadPurchase(session?.user ?? null);
    });
    return () => data.subscription.unsubscribe();
  }, []);

  const handleCheckout = async (plan: (typeof details.plans)[0]) => {
    if (!user) {
      await signInWithGoogle();
      return;
    }

    if (hasPurchased) {
      alert("You have already purchased a plan.");
      return;
    }

    setLoading(true);
    try {
      const response = await fetch(\""""
    + PAYMENTS_API
    + """", {
        method: "POST",
        headers: {
          Accept: "application/json",
          "Content-Type": "application/json",
        },
        body: JSON.stringify({ plan, userId: user.id }),
      });

      const stripePromise = loadStripe(
        process.env.NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY!
      );
      const { sessionId } = await response.json();
      const stripe = await stripePromise;

      const { error } = await stripe!.redirectToCheckout({ sessionId });
      if (error) {
        console.error("Error:", error);
      }
    } catch (error) {
      console.error("Error:", error);
    } finally {
      setLoading(false);
    }
  };

"""
    + PRICING_PLANS
)
