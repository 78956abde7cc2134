"""Template blobs for the Firebase variant."""

from __future__ import annotations

from .common import ASSETS_IMPORT, PAYMENTS_API, PRICING_PLANS

DATABASE = """import { initializeApp } from "firebase/app";
import { getFirestore } from "firebase/firestore";
import { getAuth } from "firebase/auth";

const firebaseConfig = {
  apiKey: process.env.NEXT_PUBLIC_FIREBASE_API_KEY,
  authDomain: process.env.NEXT_PUBLIC_FIREBASE_AUTH_DOMAIN,
  projectId: process.env.NEXT_PUBLIC_FIREBASE_PROJECT_ID,
  storageBucket: process.env.NEXT_PUBLIC_FIREBASE_STORAGE_BUCKET,
  messagingSenderId: process.env.NEXT_PUBLIC_FIREBASE_MESSAGING_SENDER_ID,
  appId: process.env.NEXT_PUBLIC_FIREBASE_APP_ID,
};

export const app = initializeApp(firebaseConfig);
export const db = getFirestore(app);
export const auth = getAuth(app);
"""


AUTH = """import {
  signOut as firebaseSignOut,
  User,
  signInWithPopup,
  GoogleAuthProvider,
} from "firebase/auth";
import { auth, db } from "./database";
import { doc, setDoc, getDoc } from "firebase/firestore";

// Enable Google as a sign-in provider in the Firebase console
export async function signInWithGoogle() {
  const provider = new GoogleAuthProvider();
  try {
    const result = await signInWithPopup(auth, provider);
    await createOrUpdateUserDocument(result.user);
    return result.user;
  } catch (error: any) {
    if (error.code === "auth/popup-closed-by-user") {
      console.log(
        "Sign-in popup was closed by the user before finalizing the operation."
      );
      return null;
    }
    console.error("Error during sign-in:", error);
  }
}

// Keep a users/<uid> record to track purchases
async function createOrUpdateUserDocument(user: User): Promise<void> {
  const userRef = doc(db, "users", user.uid);
  const userSnap = await getDoc(userRef);
  if (!userSnap.exists()) {
    await setDoc(userRef, {
      uid: user.uid,
      email: user.email,
      hasPurchased: false,
    });
  }
}

export async function signOut(): Promise<void> {
  await firebaseSignOut(auth);
}

export async function updateUserPurchaseStatus(
  uid: string,
  hasPurchased: boolean
): Promise<void> {
  const userRef = doc(db, "users", uid);
  await setDoc(userRef, { hasPurchased }, { merge: true });
}
"""


AUTH_ROUTE = """import { NextResponse } from "next/server";
import { signInWithGoogle } from "@/lib/auth";

// Google sign-in must be enabled as a provider in your Firebase project
export async function POST() {
  try {
    const user = await signInWithGoogle();
    return NextResponse.json({ user });
  } catch (error: unknown) {
    const message =
      error instanceof Error ? error.message : "An unknown error occurred";
    return NextResponse.json({ error: message }, { status: 400 });
  }
}
"""


NAVBAR = """"use client";
import { useState, useEffect } from "react";
import { User } from "firebase/auth";
import { auth } from "@/lib/database";
import { signOut, signInWithGoogle } from "@/lib/auth";
import Link from "next/link";
import { details } from "../constants/Constants";

export default function Navbar() {
  const [user, setUser] = useState<User | null>(null);

  useEffect(() => {
    const unsubscribe = auth.onAuthStateChanged(setUser);
    return () => unsubscribe();
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
                Welcome, {user.displayName || user.email}
              </span>
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
import { auth, db } from "@/lib/database";
import { useState, useEffect } from "react";
import { signInWithGoogle } from "@/lib/auth";
import { Verified } from \""""
    + ASSETS_IMPORT
    + """";
import { loadStripe } from "@stripe/stripe-js";
import { doc, getDoc } from "firebase/firestore";
import { details } from "../constants/Constants";
import { onAuthStateChanged, User } from "firebase/auth";

export default function Pricing() {
  const [loading, setLoading] = useState(false);
  const [user, setUser] = useState<User | null>(null);
  const [hasPurchased, setHasPurchased] = useState(false);

  useEffect(() => {
    const unsubscribe = onAuthStateChanged(auth, async (currentUser) => {
      setUser(currentUser);
      if (currentUser) {
        const docRef = doc(db, "users", currentUser.uid);
        const docSnap = await getDoc(docRef);
        if (docSnap.exists()) {
          setHasPurchased(docSnap.data().hasPurchased);
        }
      }
    });

    return () => unsubscribe();
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
        body: JSON.stringify({ plan, userId: user.uid }),
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
